"""Minimum trading volume gate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from risk_trader.analytics.statistics import total_volume
from risk_trader.models.market import Trade


@dataclass(frozen=True)
class LiquidityGate:
    """Require the sampled volume to clear a floor.

    The floor is ``minimum_volume_fraction`` of the average *per-trade* volume,
    and it is compared with the *total* sampled volume. Any fraction up to the
    sample length passes, so this is a loose floor. Kept as configured policy.
    """

    minimum_volume_fraction: float
    name: str = "liquidity"

    def minimum_volume(self, sample: Sequence[Trade]) -> float:
        if not sample:
            raise ValueError("cannot derive a volume floor from an empty sample")
        return self.minimum_volume_fraction * (total_volume(sample) / len(sample))

    def sufficient(self, sample: Sequence[Trade]) -> bool:
        return total_volume(sample) >= self.minimum_volume(sample)

    def check(self, sample: Sequence[Trade]) -> Tuple[bool, str]:
        volume = total_volume(sample)
        floor = self.minimum_volume(sample)
        if volume >= floor:
            return True, "ok"
        return False, f"trading volume {volume:.8g} below minimum {floor:.8g}"

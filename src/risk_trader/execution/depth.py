"""Order book depth search for an executable price level."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from risk_trader.models.enums import OrderSide
from risk_trader.models.market import OrderBookLevel, OrderBookSnapshot

DEFAULT_DEPTH_PARTICIPATION = 0.1


@dataclass(frozen=True)
class DepthLocator:
    participation: float = DEFAULT_DEPTH_PARTICIPATION

    def levels_for(self, side: OrderSide, book: OrderBookSnapshot) -> Sequence[OrderBookLevel]:
        return book.bids if side == OrderSide.BUY else book.asks

    def locate(
        self, side: OrderSide, book: OrderBookSnapshot, target_volume: float
    ) -> Optional[float]:
        """Return the first level where cumulative notional reaches the threshold.

        ``None`` when the side is too thin to absorb ``participation * target_volume``.
        """
        threshold = target_volume * self.participation
        cumulative = 0.0
        for entry in self.levels_for(side, book):
            cumulative += entry.amount * entry.count
            if cumulative >= threshold:
                return entry.level
        return None

"""Decision outcome models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from risk_trader.models.market import MarketStats
from risk_trader.models.order import OrderAck, OrderIntent


class OutcomeStatus(str, Enum):
    NO_ACTION = "NO_ACTION"
    ERROR = "ERROR"
    EXECUTED = "EXECUTED"


@dataclass(frozen=True)
class CycleOutcome:
    """Terminal result of one evaluate-and-act cycle."""

    symbol: str
    status: OutcomeStatus
    reason: str
    intent: Optional[OrderIntent] = None
    ack: Optional[OrderAck] = None
    stats: Optional[MarketStats] = None
    details: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def no_action(cls, symbol: str, reason: str, **kwargs: Any) -> "CycleOutcome":
        return cls(symbol=symbol, status=OutcomeStatus.NO_ACTION, reason=reason, **kwargs)

    @classmethod
    def error(cls, symbol: str, reason: str, **kwargs: Any) -> "CycleOutcome":
        return cls(symbol=symbol, status=OutcomeStatus.ERROR, reason=reason, **kwargs)

    @classmethod
    def executed(
        cls, symbol: str, intent: OrderIntent, ack: OrderAck, **kwargs: Any
    ) -> "CycleOutcome":
        return cls(
            symbol=symbol,
            status=OutcomeStatus.EXECUTED,
            reason="order submitted",
            intent=intent,
            ack=ack,
            **kwargs,
        )

    @property
    def submitted(self) -> bool:
        return self.status == OutcomeStatus.EXECUTED

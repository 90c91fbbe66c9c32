"""Market data records supplied by the exchange gateway."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, Optional, Tuple

from risk_trader.models.enums import Trend


@dataclass(frozen=True)
class Trade:
    price: float
    bid_amount: float
    ask_amount: float
    timestamp: int


@dataclass(frozen=True)
class OrderBookLevel:
    level: float
    amount: float
    count: float


@dataclass(frozen=True)
class OrderBookSnapshot:
    """Both sides are ordered best-first."""

    bids: Tuple[OrderBookLevel, ...] = ()
    asks: Tuple[OrderBookLevel, ...] = ()


@dataclass(frozen=True)
class Balance:
    currency: str
    amount: float


@dataclass(frozen=True)
class BalanceSet:
    """At most one balance per currency."""

    balances: Dict[str, Balance] = field(default_factory=dict)

    @classmethod
    def from_balances(cls, balances: Iterable[Balance]) -> "BalanceSet":
        mapping: Dict[str, Balance] = {}
        for balance in balances:
            if balance.currency in mapping:
                raise ValueError(f"duplicate balance for {balance.currency}")
            mapping[balance.currency] = balance
        return cls(balances=mapping)

    def get(self, currency: str) -> Optional[Balance]:
        return self.balances.get(currency)

    def __bool__(self) -> bool:
        return bool(self.balances)

    def __len__(self) -> int:
        return len(self.balances)

    def __iter__(self) -> Iterator[Balance]:
        return iter(self.balances.values())


@dataclass(frozen=True)
class Market:
    symbol: str
    market_id: str
    base: str
    quote: str


@dataclass(frozen=True)
class MarketStats:
    average: float
    stddev: float
    volatility: float
    trend: Trend
    total_volume: float

"""Order models and helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from risk_trader.models.enums import OrderSide


@dataclass(frozen=True)
class OrderIntent:
    side: OrderSide
    quantity: int
    price_level: float


@dataclass(frozen=True)
class OrderAck:
    order_id: str
    symbol: str
    side: OrderSide
    quantity: int
    price: float
    status: str = "open"


@dataclass(frozen=True)
class OpenOrder:
    order_id: str
    market_id: str
    symbol: Optional[str] = None

"""Model exports."""

from risk_trader.models.enums import OrderSide, Trend
from risk_trader.models.market import (
    Balance,
    BalanceSet,
    Market,
    MarketStats,
    OrderBookLevel,
    OrderBookSnapshot,
    Trade,
)
from risk_trader.models.order import OpenOrder, OrderAck, OrderIntent

__all__ = [
    "Balance",
    "BalanceSet",
    "Market",
    "MarketStats",
    "OpenOrder",
    "OrderAck",
    "OrderBookLevel",
    "OrderBookSnapshot",
    "OrderIntent",
    "OrderSide",
    "Trade",
    "Trend",
]

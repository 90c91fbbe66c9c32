"""Validation schemas for raw exchange payloads."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from risk_trader.models.market import Balance, OrderBookLevel, Trade
from risk_trader.models.order import OpenOrder


class TradePayload(BaseModel):
    price: float = Field(gt=0)
    amount: float = Field(ge=0)
    cost: Optional[float] = None
    timestamp: int = 0

    @field_validator("timestamp", mode="before")
    @classmethod
    def _default_timestamp(cls, value: Optional[int]) -> int:
        return 0 if value is None else value

    def to_trade(self) -> Trade:
        cost = self.cost if self.cost is not None else self.price * self.amount
        return Trade(
            price=self.price,
            bid_amount=cost,
            ask_amount=self.amount,
            timestamp=self.timestamp,
        )


class BookLevelPayload(BaseModel):
    price: float = Field(gt=0)
    amount: float = Field(ge=0)

    @classmethod
    def from_pair(cls, pair: List[float]) -> "BookLevelPayload":
        if len(pair) < 2:
            raise ValueError(f"order book entry needs price and amount, got {pair!r}")
        return cls(price=pair[0], amount=pair[1])

    def to_level(self) -> OrderBookLevel:
        return OrderBookLevel(level=self.price, amount=self.price, count=self.amount)


class BalancePayload(BaseModel):
    currency: str
    amount: float = Field(ge=0)

    @field_validator("currency")
    @classmethod
    def _normalize_currency(cls, value: str) -> str:
        normalized = value.strip().upper()
        if not normalized:
            raise ValueError("currency is required")
        return normalized

    def to_balance(self) -> Balance:
        return Balance(currency=self.currency, amount=self.amount)


class OpenOrderPayload(BaseModel):
    id: str
    symbol: str
    market_id: str

    def to_open_order(self) -> OpenOrder:
        return OpenOrder(order_id=self.id, market_id=self.market_id, symbol=self.symbol)

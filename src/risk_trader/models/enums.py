"""Enumerations shared across the trader."""

from enum import Enum


class OrderSide(str, Enum):
    BUY = "BUY"
    SELL = "SELL"


class Trend(str, Enum):
    BUY = "BUY"
    SELL = "SELL"
    SIDEWAYS = "SIDEWAYS"

    def to_side(self) -> OrderSide:
        if self is Trend.SIDEWAYS:
            raise ValueError("sideways trend has no order side")
        return OrderSide(self.value)

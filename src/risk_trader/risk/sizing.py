"""Volatility-scaled position sizing."""

from __future__ import annotations

from dataclasses import dataclass
import math

import numpy as np

TRADING_DAYS_PER_YEAR = 252


@dataclass(frozen=True)
class PositionSizer:
    """Size orders from a risk budget, capped by what capital can pay for.

    ``quantity = floor(min(risk * capital / (price * vol * sqrt(252)), capital / price))``

    A result of zero means "no trade"; callers must not treat it as an error.
    """

    risk_factor: float

    def risk_budget(self, capital: float, price: float, volatility: float) -> float:
        if volatility <= 0:
            return math.inf
        annualized = price * volatility * np.sqrt(TRADING_DAYS_PER_YEAR)
        if annualized <= 0:
            return math.inf
        return (self.risk_factor * capital) / annualized

    def quantity(self, capital: float, price: float, volatility: float) -> int:
        if price <= 0:
            raise ValueError(f"price must be positive, got {price}")
        if capital <= 0:
            return 0
        affordable = capital / price
        quantity = int(np.floor(min(self.risk_budget(capital, price, volatility), affordable)))
        # floating point division can land exactly on the next unit
        while quantity > 0 and quantity * price > capital:
            quantity -= 1
        return max(quantity, 0)

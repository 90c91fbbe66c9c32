"""Market statistics over a trade history sample."""

from __future__ import annotations

from typing import Sequence

import numpy as np
import pandas as pd

from risk_trader.models.enums import Trend
from risk_trader.models.market import MarketStats, Trade


def _column(sample: Sequence[Trade], field: str) -> pd.Series:
    return pd.Series([getattr(trade, field) for trade in sample], dtype="float64")


def average(sample: Sequence[Trade], field: str = "price") -> float:
    if not sample:
        raise ValueError("cannot average an empty sample")
    return float(_column(sample, field).mean())


def standard_deviation(sample: Sequence[Trade], mean: float, field: str = "price") -> float:
    """Population standard deviation (divides by N) around ``mean``."""
    if not sample:
        raise ValueError("cannot compute deviation of an empty sample")
    deviations = _column(sample, field) - mean
    return float(np.sqrt((deviations**2).mean()))


def volatility(mean: float, stddev: float) -> float:
    """Coefficient of variation; prices are expected to be strictly positive."""
    if mean == 0:
        raise ValueError("volatility is undefined for a zero mean price")
    return stddev / mean


def total_volume(sample: Sequence[Trade]) -> float:
    if not sample:
        return 0.0
    return float((_column(sample, "bid_amount") + _column(sample, "ask_amount")).sum())


def trend(sample: Sequence[Trade]) -> Trend:
    # Only the last two points are compared.
    if len(sample) < 2:
        raise ValueError("trend needs at least two trades")
    previous, last = sample[-2].price, sample[-1].price
    if last > previous:
        return Trend.BUY
    if last < previous:
        return Trend.SELL
    return Trend.SIDEWAYS


def compute_stats(sample: Sequence[Trade]) -> MarketStats:
    mean = average(sample, "price")
    stddev = standard_deviation(sample, mean, "price")
    return MarketStats(
        average=mean,
        stddev=stddev,
        volatility=volatility(mean, stddev),
        trend=trend(sample),
        total_volume=total_volume(sample),
    )

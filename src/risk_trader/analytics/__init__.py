"""Market analytics exports."""

from risk_trader.analytics.statistics import (
    average,
    compute_stats,
    standard_deviation,
    total_volume,
    trend,
    volatility,
)

__all__ = [
    "average",
    "compute_stats",
    "standard_deviation",
    "total_volume",
    "trend",
    "volatility",
]

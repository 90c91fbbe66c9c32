"""Risk management exports."""

from risk_trader.risk.liquidity import LiquidityGate
from risk_trader.risk.sizing import TRADING_DAYS_PER_YEAR, PositionSizer

__all__ = [
    "LiquidityGate",
    "PositionSizer",
    "TRADING_DAYS_PER_YEAR",
]

"""Execution layer exports."""

from risk_trader.execution.depth import DEFAULT_DEPTH_PARTICIPATION, DepthLocator
from risk_trader.execution.executor import (
    BaseOrderExecutor,
    LimitOrderExecutor,
    SimulatedOrderExecutor,
)

__all__ = [
    "BaseOrderExecutor",
    "DEFAULT_DEPTH_PARTICIPATION",
    "DepthLocator",
    "LimitOrderExecutor",
    "SimulatedOrderExecutor",
]

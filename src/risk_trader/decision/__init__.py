"""Decision layer exports."""

from risk_trader.decision.engine import DecisionEngine
from risk_trader.decision.models import CycleOutcome, OutcomeStatus
from risk_trader.decision.observer import DecisionObserver

__all__ = [
    "CycleOutcome",
    "DecisionEngine",
    "DecisionObserver",
    "OutcomeStatus",
]

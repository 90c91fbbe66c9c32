"""Wire settings, gateway and executor into scheduled trading cycles."""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from risk_trader.config import RiskStrategyConfig
from risk_trader.decision.engine import DecisionEngine
from risk_trader.decision.models import CycleOutcome
from risk_trader.decision.observer import DecisionObserver
from risk_trader.errors import ConfigurationError
from risk_trader.exchange.base import ExchangeGateway
from risk_trader.execution.executor import (
    BaseOrderExecutor,
    LimitOrderExecutor,
    SimulatedOrderExecutor,
)


logger = logging.getLogger(__name__)


def build_engine(
    config: RiskStrategyConfig,
    gateway: ExchangeGateway,
    trade: bool = False,
    executor: Optional[BaseOrderExecutor] = None,
) -> DecisionEngine:
    """Resolve the market once and return a ready engine.

    Raises ``ConfigurationError`` when the exchange does not list the symbol.
    """
    market = gateway.resolve_market(config.symbol)
    if market is None:
        raise ConfigurationError(f"Market {config.symbol} does not exist")
    if executor is None:
        executor = LimitOrderExecutor(gateway) if trade else SimulatedOrderExecutor()
    logger.info(
        "Risk strategy ready for %s on account %s (%s)",
        config.symbol,
        config.account,
        "live" if isinstance(executor, LimitOrderExecutor) else "dry run",
    )
    return DecisionEngine(config, market, gateway, executor)


def run_once(engine: DecisionEngine, observer: DecisionObserver) -> CycleOutcome:
    logger.info(
        "Executing %s risk strategy trades on account %s",
        engine.symbol,
        engine.config.account,
    )
    outcome = engine.run_cycle()
    observer.report(outcome)
    return outcome


def run_forever(
    engine: DecisionEngine,
    observer: DecisionObserver,
    interval: float,
    max_cycles: Optional[int] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Run cycles on a fixed interval; returns the number of cycles attempted."""
    cycles = 0
    while max_cycles is None or cycles < max_cycles:
        cycles += 1
        try:
            run_once(engine, observer)
        except Exception as exc:
            logger.exception("Trading cycle error: %s", exc)
        if max_cycles is not None and cycles >= max_cycles:
            break
        sleep(interval)
    return cycles

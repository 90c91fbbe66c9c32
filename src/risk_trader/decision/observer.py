"""Log formatting for decision outcomes."""

from __future__ import annotations

import logging
from typing import List, Optional

from risk_trader.decision.models import CycleOutcome, OutcomeStatus


class DecisionObserver:
    """Report cycle outcomes; the engine itself never logs."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self.history: List[CycleOutcome] = []

    def report(self, outcome: CycleOutcome) -> None:
        self.history.append(outcome)
        details = outcome.details
        if "trading_volume" in details:
            self.logger.debug(
                "%s trading volume %.8g over %s trades",
                outcome.symbol,
                details["trading_volume"],
                details.get("trades"),
            )
        if outcome.stats is not None:
            self.logger.debug(
                "%s stats: average=%.8g stddev=%.8g volatility=%.6g trend=%s",
                outcome.symbol,
                outcome.stats.average,
                outcome.stats.stddev,
                outcome.stats.volatility,
                outcome.stats.trend.value,
            )
        if details.get("balances"):
            self.logger.info(
                "%s: you have %s",
                outcome.symbol,
                " and ".join(
                    f"{amount:.8g} {currency}"
                    for currency, amount in sorted(details["balances"].items())
                ),
            )
        if "capital" in details:
            self.logger.info(
                "%s: sizing from %.8g %s, quantity %s",
                outcome.symbol,
                details["capital"],
                details.get("token"),
                details.get("quantity", "-"),
            )

        if outcome.status == OutcomeStatus.EXECUTED and outcome.intent is not None:
            self.logger.info(
                "%s: executing %s trade of %s at price %s (order %s, %s)",
                outcome.symbol,
                outcome.intent.side.value,
                outcome.intent.quantity,
                outcome.intent.price_level,
                outcome.ack.order_id if outcome.ack else "-",
                outcome.ack.status if outcome.ack else "-",
            )
        elif outcome.status == OutcomeStatus.ERROR:
            self.logger.error("%s: %s", outcome.symbol, outcome.reason)
        else:
            self.logger.info("%s: %s", outcome.symbol, outcome.reason)

"""Run risk strategy trading cycles once or on a fixed interval."""

from __future__ import annotations

import argparse
import dataclasses
import logging
from pathlib import Path
import sys

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from risk_trader.config import Settings
from risk_trader.decision import DecisionObserver, OutcomeStatus
from risk_trader.errors import ConfigurationError, ConnectivityError
from risk_trader.exchange import CcxtExchangeGateway, create_exchange_client
from risk_trader.runner import build_engine, run_forever, run_once


logger = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the risk strategy trader.")
    parser.add_argument(
        "--symbol",
        default="",
        help="Override RISK_SYMBOL, e.g. XPR_XMD.",
    )
    parser.add_argument(
        "--loop",
        action="store_true",
        help="Run continuously with sleep interval.",
    )
    parser.add_argument(
        "--interval",
        type=int,
        default=300,
        help="Loop interval seconds (default: 300).",
    )
    parser.add_argument(
        "--trade",
        action="store_true",
        help="Actually send orders (requires TRADING_ENABLED=true).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log statistics for every cycle.",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    try:
        settings = Settings.from_env()
        config = settings.strategy
        if args.symbol:
            config = dataclasses.replace(config, symbol=args.symbol)
        gateway = CcxtExchangeGateway(create_exchange_client(settings))
        trade = args.trade and settings.trading_enabled
        if args.trade and not settings.trading_enabled:
            logger.warning("Trade disabled (TRADING_ENABLED=false); running dry.")
        engine = build_engine(config, gateway, trade=trade)
    except ConfigurationError as exc:
        logger.error("Configuration error: %s", exc)
        return 2
    except ConnectivityError as exc:
        logger.error("Could not reach exchange: %s", exc)
        return 1

    observer = DecisionObserver()
    if not args.loop:
        outcome = run_once(engine, observer)
        return 1 if outcome.status == OutcomeStatus.ERROR else 0

    run_forever(engine, observer, interval=args.interval)
    return 0


if __name__ == "__main__":
    sys.exit(main())

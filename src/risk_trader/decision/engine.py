"""Decision engine running one risk-strategy cycle per call."""

from __future__ import annotations

from typing import Any, Dict, Optional

from risk_trader.analytics.statistics import compute_stats, total_volume
from risk_trader.config import RiskStrategyConfig
from risk_trader.decision.models import CycleOutcome
from risk_trader.errors import TraderError
from risk_trader.exchange.base import ExchangeGateway
from risk_trader.execution.depth import DepthLocator
from risk_trader.execution.executor import BaseOrderExecutor
from risk_trader.models.enums import OrderSide, Trend
from risk_trader.models.market import Market
from risk_trader.models.order import OrderIntent
from risk_trader.risk.liquidity import LiquidityGate
from risk_trader.risk.sizing import PositionSizer


class DecisionEngine:
    """Orchestrate open orders -> market data -> gates -> sizing -> execution.

    Every call to :meth:`run_cycle` fetches fresh data and returns exactly one
    :class:`CycleOutcome`. Nothing is cached between cycles. The open-orders
    check only guards against duplicate submissions; it is not a lock.
    """

    def __init__(
        self,
        config: RiskStrategyConfig,
        market: Market,
        gateway: ExchangeGateway,
        executor: BaseOrderExecutor,
        liquidity_gate: Optional[LiquidityGate] = None,
        sizer: Optional[PositionSizer] = None,
        locator: Optional[DepthLocator] = None,
    ) -> None:
        self.config = config
        self.market = market
        self.gateway = gateway
        self.executor = executor
        self.liquidity_gate = liquidity_gate or LiquidityGate(config.minimum_volume_fraction)
        self.sizer = sizer or PositionSizer(config.risk_factor)
        self.locator = locator or DepthLocator(config.depth_participation)

    @property
    def symbol(self) -> str:
        return self.config.symbol

    def run_cycle(self) -> CycleOutcome:
        details: Dict[str, Any] = {}
        try:
            return self._evaluate(details)
        except (TraderError, ValueError) as exc:
            return CycleOutcome.error(
                self.symbol, f"{type(exc).__name__}: {exc}", details=details
            )

    def _evaluate(self, details: Dict[str, Any]) -> CycleOutcome:
        symbol = self.symbol

        open_orders = [
            order
            for order in self.gateway.fetch_open_orders(self.config.account)
            if order.market_id == self.market.market_id
        ]
        if open_orders:
            return CycleOutcome.no_action(
                symbol,
                f"nothing to do - we have {len(open_orders)} orders on the books",
                details=details,
            )

        book = self.gateway.fetch_order_book(symbol, self.config.order_book_depth)
        history = self.gateway.fetch_trades(symbol, self.config.historical_data_count)
        details["trades"] = len(history)
        if len(history) < 2:
            return CycleOutcome.no_action(
                symbol, "not enough trade history", details=details
            )

        trading_volume = total_volume(history)
        details["trading_volume"] = trading_volume
        passed, reason = self.liquidity_gate.check(history)
        if not passed:
            return CycleOutcome.no_action(
                symbol, f"trading volume is insufficient ({reason})", details=details
            )

        balances = self.gateway.fetch_balances(self.config.account)
        if not balances:
            return CycleOutcome.error(symbol, "no balances", details=details)
        details["balances"] = {balance.currency: balance.amount for balance in balances}

        stats = compute_stats(history)
        if stats.volatility > self.config.maximum_volatility:
            return CycleOutcome.no_action(
                symbol,
                f"volatility too high ({stats.volatility:.6g} > {self.config.maximum_volatility:.6g})",
                stats=stats,
                details=details,
            )
        if stats.trend == Trend.SIDEWAYS:
            return CycleOutcome.no_action(
                symbol, "trend is sideways", stats=stats, details=details
            )

        side = stats.trend.to_side()
        # BUY spends the quote token, SELL spends the base token.
        token = self.market.quote if side == OrderSide.BUY else self.market.base
        balance = balances.get(token)
        if balance is None or balance.amount <= 0:
            return CycleOutcome.error(
                symbol, f"no balance of {token}", stats=stats, details=details
            )
        capital = balance.amount
        details["capital"] = capital
        details["token"] = token

        current_price = history[-1].price
        quantity = self.sizer.quantity(capital, current_price, stats.volatility)
        details["quantity"] = quantity
        if quantity <= 0:
            return CycleOutcome.no_action(
                symbol, "position size is zero", stats=stats, details=details
            )

        level = self.locator.locate(side, book, trading_volume)
        if level is None:
            return CycleOutcome.no_action(
                symbol, "insufficient order book depth", stats=stats, details=details
            )

        intent = OrderIntent(side=side, quantity=quantity, price_level=level)
        ack = self.executor.submit(symbol, intent.side, intent.quantity, intent.price_level)
        return CycleOutcome.executed(symbol, intent, ack, stats=stats, details=details)

"""Shared fixtures: an in-memory exchange gateway and sample market data."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

import pytest

from risk_trader.config import RiskStrategyConfig
from risk_trader.errors import OrderRejected
from risk_trader.exchange.base import ExchangeGateway
from risk_trader.models import (
    Balance,
    BalanceSet,
    Market,
    OpenOrder,
    OrderAck,
    OrderBookLevel,
    OrderBookSnapshot,
    OrderSide,
    Trade,
)


def make_trades(prices: Sequence[float], bid_amount: float = 10.0, ask_amount: float = 10.0) -> List[Trade]:
    return [
        Trade(price=price, bid_amount=bid_amount, ask_amount=ask_amount, timestamp=index)
        for index, price in enumerate(prices)
    ]


def make_levels(*pairs) -> tuple:
    return tuple(OrderBookLevel(level=price, amount=price, count=count) for price, count in pairs)


class FakeGateway(ExchangeGateway):
    def __init__(
        self,
        market: Optional[Market] = None,
        trades: Optional[List[Trade]] = None,
        book: Optional[OrderBookSnapshot] = None,
        balances: Optional[Dict[str, float]] = None,
        open_orders: Optional[List[OpenOrder]] = None,
        reject_orders: bool = False,
    ) -> None:
        self.market = market
        self.trades = trades or []
        self.book = book or OrderBookSnapshot()
        self.balances = balances or {}
        self.open_orders = open_orders or []
        self.reject_orders = reject_orders
        self.fetch_errors: Dict[str, Exception] = {}
        self.calls: List[str] = []
        self.submissions: List[tuple] = []

    def _maybe_fail(self, name: str) -> None:
        self.calls.append(name)
        if name in self.fetch_errors:
            raise self.fetch_errors[name]

    def resolve_market(self, symbol):
        self._maybe_fail("resolve_market")
        return self.market

    def fetch_order_book(self, symbol, depth):
        self._maybe_fail("fetch_order_book")
        return self.book

    def fetch_trades(self, symbol, count):
        self._maybe_fail("fetch_trades")
        return list(self.trades[-count:])

    def fetch_balances(self, account):
        self._maybe_fail("fetch_balances")
        return BalanceSet.from_balances(
            Balance(currency=currency, amount=amount)
            for currency, amount in self.balances.items()
        )

    def fetch_open_orders(self, account):
        self._maybe_fail("fetch_open_orders")
        return list(self.open_orders)

    def submit_limit_order(self, symbol, side: OrderSide, quantity, price):
        self._maybe_fail("submit_limit_order")
        self.submissions.append((symbol, side, quantity, price))
        if self.reject_orders:
            raise OrderRejected("insufficient funds")
        return OrderAck(
            order_id=f"order-{len(self.submissions)}",
            symbol=symbol,
            side=side,
            quantity=quantity,
            price=price,
        )


@pytest.fixture
def market() -> Market:
    return Market(symbol="XPR_XMD", market_id="1", base="XPR", quote="XMD")


@pytest.fixture
def strategy_config() -> RiskStrategyConfig:
    return RiskStrategyConfig(
        account="trader1",
        symbol="XPR_XMD",
        risk_factor=0.5,
        historical_data_count=4,
        minimum_volume_fraction=0.5,
        maximum_volatility=0.1,
    )


@pytest.fixture
def sell_gateway(market) -> FakeGateway:
    """History trending down with enough volume, balances and book depth to sell."""
    return FakeGateway(
        market=market,
        trades=make_trades([100, 100, 100, 90]),
        book=OrderBookSnapshot(
            bids=make_levels((89, 1), (88, 5)),
            asks=make_levels((91, 1), (92, 5)),
        ),
        balances={"XPR": 1000.0, "XMD": 500.0},
    )

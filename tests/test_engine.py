"""End-to-end decision engine scenarios against an in-memory gateway."""

import dataclasses

import pytest

from conftest import FakeGateway, make_levels, make_trades
from risk_trader.analytics import compute_stats
from risk_trader.config import RiskStrategyConfig
from risk_trader.decision import DecisionEngine, OutcomeStatus
from risk_trader.errors import ConnectivityError
from risk_trader.execution import LimitOrderExecutor
from risk_trader.models import OpenOrder, OrderBookSnapshot, OrderSide, Trend


def build(config, gateway):
    return DecisionEngine(config, gateway.market, gateway, LimitOrderExecutor(gateway))


def test_open_orders_abort_without_fetching(strategy_config, sell_gateway):
    sell_gateway.open_orders = [OpenOrder(order_id="7", market_id="1")]
    outcome = build(strategy_config, sell_gateway).run_cycle()

    assert outcome.status == OutcomeStatus.NO_ACTION
    assert "orders on the books" in outcome.reason
    assert sell_gateway.submissions == []
    assert sell_gateway.calls == ["fetch_open_orders"]


def test_open_orders_on_other_markets_are_ignored(strategy_config, sell_gateway):
    sell_gateway.open_orders = [OpenOrder(order_id="7", market_id="99")]
    outcome = build(strategy_config, sell_gateway).run_cycle()
    assert outcome.status == OutcomeStatus.EXECUTED


def test_downtrend_sells_base_token(strategy_config, sell_gateway):
    outcome = build(strategy_config, sell_gateway).run_cycle()

    assert outcome.status == OutcomeStatus.EXECUTED
    assert outcome.stats.trend == Trend.SELL
    assert outcome.intent.side == OrderSide.SELL
    assert outcome.intent.quantity == 7
    assert outcome.intent.price_level == 91
    assert outcome.details["token"] == "XPR"
    assert outcome.ack.order_id == "order-1"
    assert sell_gateway.submissions == [("XPR_XMD", OrderSide.SELL, 7, 91)]


def test_uptrend_buys_with_quote_token(strategy_config, market):
    gateway = FakeGateway(
        market=market,
        trades=make_trades([100, 100, 100, 110]),
        book=OrderBookSnapshot(bids=make_levels((109, 1)), asks=make_levels((111, 1))),
        balances={"XMD": 1000.0},
    )
    outcome = build(strategy_config, gateway).run_cycle()

    assert outcome.status == OutcomeStatus.EXECUTED
    assert outcome.intent.side == OrderSide.BUY
    assert outcome.intent.price_level == 109
    assert outcome.details["token"] == "XMD"
    assert len(gateway.submissions) == 1


@pytest.mark.parametrize(
    "prices, trend",
    [([100, 10, 100, 50], Trend.SELL), ([100, 10, 50, 100], Trend.BUY)],
)
def test_high_volatility_aborts_in_either_direction(strategy_config, market, prices, trend):
    gateway = FakeGateway(
        market=market,
        trades=make_trades(prices),
        book=OrderBookSnapshot(bids=make_levels((99, 100)), asks=make_levels((51, 100))),
        balances={"XPR": 1000.0, "XMD": 1000.0},
    )
    outcome = build(strategy_config, gateway).run_cycle()

    assert outcome.status == OutcomeStatus.NO_ACTION
    assert "volatility" in outcome.reason
    assert outcome.stats.trend == trend
    assert outcome.stats.volatility > strategy_config.maximum_volatility
    assert gateway.submissions == []


def test_volatility_at_ceiling_still_trades(strategy_config, sell_gateway):
    ceiling = compute_stats(sell_gateway.trades).volatility
    config = dataclasses.replace(strategy_config, maximum_volatility=ceiling)
    outcome = build(config, sell_gateway).run_cycle()

    assert outcome.status == OutcomeStatus.EXECUTED
    assert outcome.stats.volatility == ceiling
    assert len(sell_gateway.submissions) == 1


def test_no_balances_is_an_error(strategy_config, sell_gateway):
    sell_gateway.balances = {}
    outcome = build(strategy_config, sell_gateway).run_cycle()

    assert outcome.status == OutcomeStatus.ERROR
    assert outcome.reason == "no balances"
    assert sell_gateway.submissions == []


def test_missing_token_balance_is_an_error(strategy_config, sell_gateway):
    sell_gateway.balances = {"XMD": 500.0}
    outcome = build(strategy_config, sell_gateway).run_cycle()

    assert outcome.status == OutcomeStatus.ERROR
    assert outcome.reason == "no balance of XPR"
    assert sell_gateway.submissions == []


def test_sideways_trend_aborts(strategy_config, sell_gateway):
    sell_gateway.trades = make_trades([100, 95, 90, 90])
    outcome = build(strategy_config, sell_gateway).run_cycle()

    assert outcome.status == OutcomeStatus.NO_ACTION
    assert outcome.reason == "trend is sideways"


def test_insufficient_liquidity_aborts_before_balances(market):
    config = RiskStrategyConfig(
        account="trader1",
        symbol="XPR_XMD",
        risk_factor=0.5,
        historical_data_count=4,
        minimum_volume_fraction=10.0,
        maximum_volatility=0.1,
    )
    gateway = FakeGateway(market=market, trades=make_trades([100, 100, 100, 90]))
    outcome = build(config, gateway).run_cycle()

    assert outcome.status == OutcomeStatus.NO_ACTION
    assert "insufficient" in outcome.reason
    assert "fetch_balances" not in gateway.calls


def test_short_history_aborts(strategy_config, sell_gateway):
    sell_gateway.trades = make_trades([100])
    outcome = build(strategy_config, sell_gateway).run_cycle()

    assert outcome.status == OutcomeStatus.NO_ACTION
    assert outcome.reason == "not enough trade history"


def test_zero_position_size_aborts(strategy_config, sell_gateway):
    sell_gateway.balances = {"XPR": 50.0}
    outcome = build(strategy_config, sell_gateway).run_cycle()

    assert outcome.status == OutcomeStatus.NO_ACTION
    assert outcome.reason == "position size is zero"
    assert sell_gateway.submissions == []


def test_thin_book_never_submits_unpriced_order(strategy_config, sell_gateway):
    sell_gateway.book = OrderBookSnapshot(bids=make_levels((89, 100)), asks=())
    outcome = build(strategy_config, sell_gateway).run_cycle()

    assert outcome.status == OutcomeStatus.NO_ACTION
    assert outcome.reason == "insufficient order book depth"
    assert sell_gateway.submissions == []


def test_connectivity_failure_becomes_error(strategy_config, sell_gateway):
    sell_gateway.fetch_errors["fetch_trades"] = ConnectivityError("timeout")
    outcome = build(strategy_config, sell_gateway).run_cycle()

    assert outcome.status == OutcomeStatus.ERROR
    assert "timeout" in outcome.reason
    assert sell_gateway.submissions == []


def test_rejected_order_becomes_error(strategy_config, sell_gateway):
    sell_gateway.reject_orders = True
    outcome = build(strategy_config, sell_gateway).run_cycle()

    assert outcome.status == OutcomeStatus.ERROR
    assert "OrderRejected" in outcome.reason
    assert len(sell_gateway.submissions) == 1


def test_cycles_hold_no_state(strategy_config, sell_gateway):
    engine = build(strategy_config, sell_gateway)
    first = engine.run_cycle()
    sell_gateway.open_orders = [OpenOrder(order_id="order-1", market_id="1")]
    second = engine.run_cycle()

    assert first.status == OutcomeStatus.EXECUTED
    assert second.status == OutcomeStatus.NO_ACTION
    assert len(sell_gateway.submissions) == 1


@pytest.mark.parametrize("balance", [0.0, -1.0])
def test_non_positive_balance_is_an_error(strategy_config, sell_gateway, balance):
    sell_gateway.balances = {"XPR": balance, "XMD": 10.0}
    outcome = build(strategy_config, sell_gateway).run_cycle()
    assert outcome.status == OutcomeStatus.ERROR
    assert outcome.reason == "no balance of XPR"

"""ccxt-backed exchange gateway."""

from __future__ import annotations

import logging
import os
from typing import Any, Callable, List, Optional, TypeVar

import ccxt
from pydantic import ValidationError

from risk_trader.config import Settings
from risk_trader.errors import ConfigurationError, ConnectivityError, OrderRejected
from risk_trader.exchange.base import ExchangeGateway
from risk_trader.exchange.schemas import (
    BalancePayload,
    BookLevelPayload,
    OpenOrderPayload,
    TradePayload,
)
from risk_trader.models.enums import OrderSide
from risk_trader.models.market import BalanceSet, Market, OrderBookSnapshot, Trade
from risk_trader.models.order import OpenOrder, OrderAck


logger = logging.getLogger(__name__)

T = TypeVar("T")


def _load_proxies() -> dict[str, str] | None:
    http_proxy = (
        os.getenv("EXCHANGE_HTTP_PROXY")
        or os.getenv("HTTP_PROXY")
        or os.getenv("http_proxy")
    )
    https_proxy = (
        os.getenv("EXCHANGE_HTTPS_PROXY")
        or os.getenv("HTTPS_PROXY")
        or os.getenv("https_proxy")
    )

    proxies: dict[str, str] = {}
    if http_proxy:
        proxies["http"] = http_proxy
    if https_proxy:
        proxies["https"] = https_proxy
    return proxies or None


def create_exchange_client(settings: Settings) -> ccxt.Exchange:
    exchange_class = getattr(ccxt, settings.exchange_id, None)
    if exchange_class is None:
        raise ConfigurationError(f"unknown exchange id {settings.exchange_id!r}")
    config: dict[str, Any] = {
        "apiKey": settings.exchange_api_key,
        "secret": settings.exchange_api_secret,
        "enableRateLimit": True,
        "timeout": settings.exchange_timeout_ms,
    }
    if settings.exchange_password:
        config["password"] = settings.exchange_password
    exchange = exchange_class(config)
    proxies = _load_proxies()
    if proxies:
        exchange.proxies = proxies
    try:
        exchange.set_sandbox_mode(settings.exchange_sandbox)
    except (AttributeError, ccxt.NotSupported):
        exchange.options["sandboxMode"] = settings.exchange_sandbox
    return exchange


def to_exchange_symbol(symbol: str) -> str:
    """``XPR_XMD`` -> ``XPR/XMD``."""
    base, _, quote = symbol.partition("_")
    if not base or not quote:
        raise ConfigurationError(f"symbol must look like BASE_QUOTE, got {symbol!r}")
    return f"{base}/{quote}"


class CcxtExchangeGateway(ExchangeGateway):
    """Gateway over a synchronous ccxt exchange client.

    The account is implied by the client's API credentials, so the ``account``
    argument of the balance and open-order fetches is only used for logging.
    """

    def __init__(self, exchange: ccxt.Exchange) -> None:
        self.exchange = exchange

    def _read(self, what: str, call: Callable[[], T]) -> T:
        try:
            return call()
        except (ccxt.NetworkError, ccxt.ExchangeError) as exc:
            raise ConnectivityError(f"failed to fetch {what}: {exc}") from exc

    def resolve_market(self, symbol: str) -> Optional[Market]:
        markets = self._read("markets", self.exchange.load_markets)
        market = markets.get(to_exchange_symbol(symbol))
        if market is None:
            return None
        return Market(
            symbol=symbol,
            market_id=str(market["id"]),
            base=market["base"],
            quote=market["quote"],
        )

    def fetch_order_book(self, symbol: str, depth: int) -> OrderBookSnapshot:
        raw = self._read(
            "order book",
            lambda: self.exchange.fetch_order_book(to_exchange_symbol(symbol), limit=depth),
        )
        try:
            bids = tuple(BookLevelPayload.from_pair(pair).to_level() for pair in raw.get("bids", []))
            asks = tuple(BookLevelPayload.from_pair(pair).to_level() for pair in raw.get("asks", []))
        except (ValidationError, ValueError) as exc:
            raise ConnectivityError(f"malformed order book for {symbol}: {exc}") from exc
        return OrderBookSnapshot(bids=bids, asks=asks)

    def fetch_trades(self, symbol: str, count: int) -> List[Trade]:
        raw = self._read(
            "trades",
            lambda: self.exchange.fetch_trades(to_exchange_symbol(symbol), limit=count),
        )
        try:
            trades = [TradePayload.model_validate(item).to_trade() for item in raw]
        except ValidationError as exc:
            raise ConnectivityError(f"malformed trade history for {symbol}: {exc}") from exc
        trades.sort(key=lambda trade: trade.timestamp)
        return trades[-count:] if count else []

    def fetch_balances(self, account: str) -> BalanceSet:
        raw = self._read("balances", self.exchange.fetch_balance)
        free = raw.get("free") or {}
        balances = []
        try:
            for currency, amount in free.items():
                if amount is None or float(amount) <= 0:
                    continue
                balances.append(
                    BalancePayload(currency=currency, amount=amount).to_balance()
                )
        except ValidationError as exc:
            raise ConnectivityError(f"malformed balances for {account}: {exc}") from exc
        logger.debug("Fetched %d non-zero balances for %s", len(balances), account)
        return BalanceSet.from_balances(balances)

    def fetch_open_orders(self, account: str) -> List[OpenOrder]:
        raw = self._read("open orders", self.exchange.fetch_open_orders)
        markets = self.exchange.markets or {}
        orders = []
        try:
            for item in raw:
                symbol = item.get("symbol") or ""
                market_id = (markets.get(symbol) or {}).get("id", symbol)
                orders.append(
                    OpenOrderPayload(
                        id=str(item.get("id")), symbol=symbol, market_id=str(market_id)
                    ).to_open_order()
                )
        except ValidationError as exc:
            raise ConnectivityError(f"malformed open orders for {account}: {exc}") from exc
        return orders

    def submit_limit_order(
        self, symbol: str, side: OrderSide, quantity: int, price: float
    ) -> OrderAck:
        try:
            response = self.exchange.create_order(
                to_exchange_symbol(symbol), "limit", side.value.lower(), quantity, price
            )
        except ccxt.NetworkError as exc:
            raise ConnectivityError(f"order submission failed: {exc}") from exc
        except ccxt.ExchangeError as exc:
            raise OrderRejected(f"{side.value} {quantity} {symbol} @ {price} rejected: {exc}") from exc
        return OrderAck(
            order_id=str(response.get("id")),
            symbol=symbol,
            side=side,
            quantity=quantity,
            price=price,
            status=response.get("status") or "open",
        )

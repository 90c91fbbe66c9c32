"""Abstract exchange gateway interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from risk_trader.models.enums import OrderSide
from risk_trader.models.market import BalanceSet, Market, OrderBookSnapshot, Trade
from risk_trader.models.order import OpenOrder, OrderAck


class ExchangeGateway(ABC):
    """Collaborator operations the decision engine relies on.

    Fetches raise ``ConnectivityError`` on transport failure and submissions
    raise ``OrderRejected`` when the exchange refuses the order.
    """

    @abstractmethod
    def resolve_market(self, symbol: str) -> Optional[Market]:
        raise NotImplementedError

    @abstractmethod
    def fetch_order_book(self, symbol: str, depth: int) -> OrderBookSnapshot:
        raise NotImplementedError

    @abstractmethod
    def fetch_trades(self, symbol: str, count: int) -> List[Trade]:
        """Most recent ``count`` trades, oldest first. May return fewer."""
        raise NotImplementedError

    @abstractmethod
    def fetch_balances(self, account: str) -> BalanceSet:
        raise NotImplementedError

    @abstractmethod
    def fetch_open_orders(self, account: str) -> List[OpenOrder]:
        raise NotImplementedError

    @abstractmethod
    def submit_limit_order(
        self, symbol: str, side: OrderSide, quantity: int, price: float
    ) -> OrderAck:
        raise NotImplementedError

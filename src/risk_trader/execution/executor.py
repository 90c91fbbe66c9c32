"""Order executors that turn a decision into a limit order."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List
from uuid import uuid4

from risk_trader.exchange.base import ExchangeGateway
from risk_trader.models.enums import OrderSide
from risk_trader.models.order import OrderAck


class BaseOrderExecutor(ABC):
    """Standard executor interface for dry-run and live trading."""

    @abstractmethod
    def submit(self, symbol: str, side: OrderSide, quantity: int, price: float) -> OrderAck:
        raise NotImplementedError


class LimitOrderExecutor(BaseOrderExecutor):
    """Submit limit orders through the exchange gateway.

    ``OrderRejected`` from the gateway propagates unchanged; no resubmission.
    """

    def __init__(self, gateway: ExchangeGateway) -> None:
        self.gateway = gateway

    def submit(self, symbol: str, side: OrderSide, quantity: int, price: float) -> OrderAck:
        return self.gateway.submit_limit_order(symbol, side, quantity, price)


class SimulatedOrderExecutor(BaseOrderExecutor):
    """Dry-run executor that acknowledges orders without sending them."""

    def __init__(self) -> None:
        self.submitted: List[OrderAck] = []

    def submit(self, symbol: str, side: OrderSide, quantity: int, price: float) -> OrderAck:
        ack = OrderAck(
            order_id=f"SIM-{uuid4()}",
            symbol=symbol,
            side=side,
            quantity=quantity,
            price=price,
            status="simulated",
        )
        self.submitted.append(ack)
        return ack

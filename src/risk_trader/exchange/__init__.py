"""Exchange collaborator exports."""

from risk_trader.exchange.base import ExchangeGateway
from risk_trader.exchange.ccxt_gateway import (
    CcxtExchangeGateway,
    create_exchange_client,
    to_exchange_symbol,
)

__all__ = [
    "CcxtExchangeGateway",
    "ExchangeGateway",
    "create_exchange_client",
    "to_exchange_symbol",
]

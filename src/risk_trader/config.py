"""Configuration loader for the risk strategy trader."""

from dataclasses import dataclass
import math
import os
from typing import Mapping, Optional

from dotenv import load_dotenv

from risk_trader.errors import ConfigurationError


def _get_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_int(value: str | None, default: int) -> int:
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _require(env: Mapping[str, str], name: str) -> str:
    value = env.get(name)
    if value is None or value.strip() == "":
        raise ConfigurationError(f"missing required setting {name}")
    return value.strip()


def _require_float(env: Mapping[str, str], name: str) -> float:
    raw = _require(env, name)
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from None


def _require_int(env: Mapping[str, str], name: str) -> int:
    raw = _require(env, name)
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


def _optional_float(env: Mapping[str, str], name: str, default: float) -> float:
    value = env.get(name)
    if value is None or value.strip() == "":
        return default
    return _require_float(env, name)


def _optional_int(env: Mapping[str, str], name: str, default: int) -> int:
    value = env.get(name)
    if value is None or value.strip() == "":
        return default
    return _require_int(env, name)


@dataclass(frozen=True)
class RiskStrategyConfig:
    """Immutable strategy parameters handed to the decision engine."""

    account: str
    symbol: str
    risk_factor: float
    historical_data_count: int
    minimum_volume_fraction: float
    maximum_volatility: float
    order_book_depth: int = 100
    depth_participation: float = 0.1

    def __post_init__(self) -> None:
        if "_" not in self.symbol:
            raise ConfigurationError(
                f"symbol must look like BASE_QUOTE, got {self.symbol!r}"
            )
        # NaN compares False against every bound, so finiteness is checked first.
        if not math.isfinite(self.risk_factor) or self.risk_factor <= 0:
            raise ConfigurationError("risk factor must be a finite positive number")
        if self.historical_data_count < 2:
            raise ConfigurationError("historical data count must be at least 2")
        if not math.isfinite(self.minimum_volume_fraction) or self.minimum_volume_fraction < 0:
            raise ConfigurationError("minimum volume fraction must be a finite non-negative number")
        if math.isnan(self.maximum_volatility) or self.maximum_volatility < 0:
            raise ConfigurationError("maximum volatility must not be negative or NaN")
        if self.order_book_depth <= 0:
            raise ConfigurationError("order book depth must be positive")
        if not math.isfinite(self.depth_participation) or not 0 < self.depth_participation <= 1:
            raise ConfigurationError("depth participation must be in (0, 1]")

    @property
    def base_token(self) -> str:
        return self.symbol.split("_")[0]

    @property
    def quote_token(self) -> str:
        return self.symbol.split("_")[1]

    @classmethod
    def from_mapping(cls, env: Mapping[str, str]) -> "RiskStrategyConfig":
        return cls(
            account=_require(env, "TRADER_ACCOUNT"),
            symbol=_require(env, "RISK_SYMBOL"),
            risk_factor=_require_float(env, "RISK_MANAGEMENT_FACTOR"),
            historical_data_count=_require_int(env, "RISK_HISTORICAL_DATA_COUNT"),
            minimum_volume_fraction=_require_float(env, "RISK_MIN_TRADING_VOLUME_PCT"),
            maximum_volatility=_require_float(env, "RISK_MAX_VOLATILITY"),
            order_book_depth=_optional_int(env, "RISK_ORDER_BOOK_DEPTH", 100),
            depth_participation=_optional_float(env, "RISK_DEPTH_PARTICIPATION", 0.1),
        )


@dataclass(frozen=True)
class Settings:
    strategy: RiskStrategyConfig
    exchange_id: str
    exchange_api_key: str
    exchange_api_secret: str
    exchange_password: str
    exchange_sandbox: bool
    exchange_timeout_ms: int
    trading_enabled: bool

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        if env is None:
            load_dotenv()
            env = os.environ
        return cls(
            strategy=RiskStrategyConfig.from_mapping(env),
            exchange_id=env.get("EXCHANGE_ID", "okx"),
            exchange_api_key=env.get("EXCHANGE_API_KEY", ""),
            exchange_api_secret=env.get("EXCHANGE_API_SECRET", ""),
            exchange_password=env.get("EXCHANGE_PASSWORD", ""),
            exchange_sandbox=_get_bool(env.get("EXCHANGE_SANDBOX"), default=True),
            exchange_timeout_ms=_get_int(env.get("EXCHANGE_TIMEOUT_MS"), 30000),
            trading_enabled=_get_bool(env.get("TRADING_ENABLED"), default=False),
        )

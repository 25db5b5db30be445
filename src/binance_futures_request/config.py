"""Configuration management for the futures request client."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from binance_common.constants import DERIVATIVES_TRADING_USDS_FUTURES_REST_API_PROD_URL
from dotenv import load_dotenv

from binance_futures_request.account import Account

DEFAULT_BASE_URL = DERIVATIVES_TRADING_USDS_FUTURES_REST_API_PROD_URL
DEFAULT_ASSET = "USDT"
DEFAULT_TIMEOUT = 5.0


@dataclass
class APIConfig:
    """Credentials of the account this process trades with."""

    account_id: int = 0
    account_name: str = "default"
    binance_api_key: str = ""
    binance_api_secret: str = ""


@dataclass
class ClientConfig:
    """Transport and catalog settings."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT  # seconds
    default_asset: str = DEFAULT_ASSET
    symbol: str = "BTCUSDT"


@dataclass
class Config:
    """Main configuration container."""

    api: APIConfig = field(default_factory=APIConfig)
    client: ClientConfig = field(default_factory=ClientConfig)

    @property
    def has_credentials(self) -> bool:
        return bool(self.api.binance_api_key and self.api.binance_api_secret)

    def account(self) -> Account:
        """Build the configured account."""
        return Account(
            id=self.api.account_id,
            name=self.api.account_name,
            api_key=self.api.binance_api_key,
            api_secret=self.api.binance_api_secret,
        )

    @classmethod
    def from_env(cls, env_path: Path | None = None) -> "Config":
        """Load configuration from environment variables.

        Args:
            env_path: Path to .env file (optional)

        Returns:
            Config instance populated from environment
        """
        if env_path:
            load_dotenv(env_path)
        else:
            load_dotenv()

        api = APIConfig(
            account_id=int(os.getenv("BINANCE_ACCOUNT_ID", "0")),
            account_name=os.getenv("BINANCE_ACCOUNT_NAME", "default"),
            binance_api_key=os.getenv("BINANCE_API_KEY", ""),
            binance_api_secret=os.getenv("BINANCE_API_SECRET", ""),
        )

        client = ClientConfig(
            base_url=os.getenv("BINANCE_FUTURES_BASE_URL", DEFAULT_BASE_URL),
            timeout=float(os.getenv("BINANCE_REQUEST_TIMEOUT", str(DEFAULT_TIMEOUT))),
            default_asset=os.getenv("BINANCE_DEFAULT_ASSET", DEFAULT_ASSET).strip().upper(),
            symbol=os.getenv("TRADING_SYMBOL", "BTCUSDT").strip().upper(),
        )

        return cls(api=api, client=client)

"""Binance Futures request client - account snapshot entry point.

Loads credentials from the environment (.env supported), opens one shared
HTTP client and fetches, concurrently:
1. Latest price of TRADING_SYMBOL (public)
2. Balance of the default asset (signed)
3. Current leverage for TRADING_SYMBOL (signed)
"""

import asyncio
import contextlib
import sys

from binance_futures_request.client import FuturesHttpClient
from binance_futures_request.config import Config
from binance_futures_request.endpoints import FuturesRequest
from binance_futures_request.errors import LeverageNotFoundError
from binance_futures_request.logging import setup_logging


async def main_async() -> int:
    """Async main entry point.

    Returns:
        Process exit code
    """
    logger = setup_logging()
    config = Config.from_env()
    symbol = config.client.symbol

    async with FuturesHttpClient(timeout=config.client.timeout) as http_client:
        futures = FuturesRequest(
            http_client,
            base_url=config.client.base_url,
            default_asset=config.client.default_asset,
        )

        if not config.has_credentials:
            logger.warning("BINANCE_API_KEY/BINANCE_API_SECRET not set, public data only")
            price = await futures.get_symbol_price(symbol)
            print(f"{symbol}: {price}")
            return 0

        account = config.account()
        logger.info(f"Account {account.id} ({account.name}), fingerprint {account.fingerprint()}")

        price, balance, leverage = await asyncio.gather(
            futures.get_symbol_price(symbol),
            futures.get_account_balance(account),
            futures.get_leverage(account, symbol),
            return_exceptions=True,
        )

    if isinstance(price, BaseException):
        logger.error(f"Price request failed: {price}")
        return 1
    print(f"{symbol}: {price}")

    if isinstance(balance, BaseException):
        logger.error(f"Balance request failed: {balance}")
    elif balance is None:
        print(f"{config.client.default_asset} balance: none")
    else:
        print(
            f"{balance['asset']} balance: {balance['balance']} "
            f"(available {balance.get('availableBalance', '?')})"
        )

    if isinstance(leverage, LeverageNotFoundError):
        logger.error(str(leverage))
    elif isinstance(leverage, BaseException):
        logger.error(f"Leverage request failed: {leverage}")
    else:
        print(f"{symbol} leverage: {leverage}x")

    return 0


def main() -> None:
    """Application entry point."""
    exit_code = 1
    with contextlib.suppress(KeyboardInterrupt):
        exit_code = asyncio.run(main_async())
    sys.exit(exit_code)


if __name__ == "__main__":
    main()

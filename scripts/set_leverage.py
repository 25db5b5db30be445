#!/usr/bin/env python3
"""Script to manually adjust Binance Futures leverage.

Usage:
    uv run python scripts/set_leverage.py
    uv run python scripts/set_leverage.py 10
"""

import asyncio
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from binance_futures_request.client import FuturesHttpClient
from binance_futures_request.config import Config
from binance_futures_request.endpoints import FuturesRequest
from binance_futures_request.errors import LeverageNotFoundError

MAX_LEVERAGE = 125


async def main() -> None:
    """Main entry point."""
    config = Config.from_env()

    if not config.has_credentials:
        print("Error: Binance API credentials not configured in .env")
        sys.exit(1)

    symbol = config.client.symbol
    account = config.account()
    print(f"Symbol: {symbol}")
    print("-" * 50)

    async with FuturesHttpClient(timeout=config.client.timeout) as http_client:
        futures = FuturesRequest(http_client, base_url=config.client.base_url)

        try:
            current = await futures.get_leverage(account, symbol)
            print(f"Current leverage: {current}x\n")
        except LeverageNotFoundError as e:
            print(f"Error: {e}")
            return

        if len(sys.argv) > 1:
            choice = sys.argv[1]
        else:
            print(f"Enter new leverage (1-{MAX_LEVERAGE}):")
            print("  Enter 'q' to quit")
            print()
            choice = input("Leverage: ").strip().lower()
            if choice == "q":
                print("Cancelled.")
                return

        try:
            new_leverage = int(choice)
        except ValueError:
            print(f"Invalid leverage value: {choice}")
            return

        if new_leverage < 1 or new_leverage > MAX_LEVERAGE:
            print(f"Leverage must be between 1 and {MAX_LEVERAGE}. Got: {new_leverage}")
            return

        if new_leverage == current:
            print(f"Leverage already {current}x, nothing to do.")
            return

        result = await futures.set_leverage(account, symbol, new_leverage)
        print(f"Leverage set: {result.get('leverage')}x")
        print(f"Max notional: {result.get('maxNotionalValue')}")


if __name__ == "__main__":
    asyncio.run(main())

#!/usr/bin/env python3
"""Script to place a single Binance Futures order.

Usage:
    uv run python scripts/place_order.py BUY 0.001            # market order
    uv run python scripts/place_order.py SELL 0.001 65000     # limit order (GTC)
    uv run python scripts/place_order.py SELL 0.001 --reduce-only
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import httpx

from binance_futures_request.client import FuturesHttpClient
from binance_futures_request.config import Config
from binance_futures_request.endpoints import FuturesRequest


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Place a Binance Futures order")
    parser.add_argument("side", type=str.upper, choices=["BUY", "SELL"])
    parser.add_argument("quantity", type=str)
    parser.add_argument("price", type=str, nargs="?", default=None)
    parser.add_argument("--symbol", type=str.upper, default=None)
    parser.add_argument("--reduce-only", action="store_true")
    return parser.parse_args()


async def main() -> None:
    """Main entry point."""
    args = parse_args()
    config = Config.from_env()

    if not config.has_credentials:
        print("Error: Binance API credentials not configured in .env")
        sys.exit(1)

    symbol = args.symbol or config.client.symbol
    order_params: dict[str, str | bool] = {
        "symbol": symbol,
        "side": args.side,
        "type": "LIMIT" if args.price else "MARKET",
        "quantity": args.quantity,
    }
    if args.price:
        order_params["price"] = args.price
        order_params["timeInForce"] = "GTC"
    if args.reduce_only:
        order_params["reduceOnly"] = True

    print(f"Placing order: {order_params}")

    async with FuturesHttpClient(timeout=config.client.timeout) as http_client:
        futures = FuturesRequest(http_client, base_url=config.client.base_url)
        try:
            order = await futures.create_new_order(config.account(), order_params)
        except httpx.HTTPStatusError as e:
            print(f"Order rejected: {e.response.text}")
            sys.exit(1)

    print(f"Order ID: {order.get('orderId')}")
    print(f"Status: {order.get('status')}")


if __name__ == "__main__":
    asyncio.run(main())

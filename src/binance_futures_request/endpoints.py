"""Futures REST endpoint catalog.

Each method declares one exchange operation and, where the raw payload is
not what callers want, narrows it with a small response transform.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from binance_futures_request.account import Account
from binance_futures_request.client import FuturesHttpClient
from binance_futures_request.config import DEFAULT_ASSET, DEFAULT_BASE_URL
from binance_futures_request.errors import LeverageNotFoundError
from binance_futures_request.request import PublicEndpoint, RequestBuilder, SignedEndpoint
from binance_futures_request.signing import ParamValue
from binance_futures_request.utils import find_first

logger = logging.getLogger(__name__)

LISTEN_KEY_CREATE = SignedEndpoint("POST", "/fapi/v1/listenKey")
LISTEN_KEY_EXTEND = SignedEndpoint("PUT", "/fapi/v1/listenKey")
LISTEN_KEY_CLOSE = SignedEndpoint("DELETE", "/fapi/v1/listenKey")
EXCHANGE_INFO = PublicEndpoint("GET", "/fapi/v1/exchangeInfo")
TICKER_PRICE = PublicEndpoint("GET", "/fapi/v1/ticker/price")
BALANCE = SignedEndpoint("GET", "/fapi/v2/balance")
ACCOUNT_INFO = SignedEndpoint("GET", "/fapi/v2/account")
NEW_ORDER = SignedEndpoint("POST", "/fapi/v1/order")
CANCEL_ORDER = SignedEndpoint("DELETE", "/fapi/v1/order")
CANCEL_ALL_OPEN_ORDERS = SignedEndpoint("DELETE", "/fapi/v1/allOpenOrders")
NEW_BATCH_ORDERS = SignedEndpoint("POST", "/fapi/v1/batchOrders")
CANCEL_BATCH_ORDERS = SignedEndpoint("DELETE", "/fapi/v1/batchOrders")
SET_LEVERAGE = SignedEndpoint("POST", "/fapi/v1/leverage")
GET_POSITION_MODE = SignedEndpoint("GET", "/fapi/v1/positionSide/dual")
SET_POSITION_MODE = SignedEndpoint("POST", "/fapi/v1/positionSide/dual")
SET_MARGIN_TYPE = SignedEndpoint("POST", "/fapi/v1/marginType")
POSITION_MARGIN = SignedEndpoint("POST", "/fapi/v1/positionMargin")
INCOME_HISTORY = SignedEndpoint("GET", "/fapi/v1/income")
ALL_ORDERS = SignedEndpoint("GET", "/fapi/v1/allOrders")
OPEN_ORDERS = SignedEndpoint("GET", "/fapi/v1/openOrders")

# positionMargin "type" values
MARGIN_ADD = 1
MARGIN_REDUCE = 2


class FuturesRequest:
    """Binance USDS-M Futures REST operations.

    All methods are coroutines; run several at once with ``asyncio.gather``.
    The HTTP client is injected so that one connection pool serves every
    catalog and account in the process.
    """

    def __init__(
        self,
        http_client: FuturesHttpClient,
        base_url: str = DEFAULT_BASE_URL,
        default_asset: str = DEFAULT_ASSET,
    ) -> None:
        """Initialize endpoint catalog.

        Args:
            http_client: Shared transport
            base_url: Exchange REST host
            default_asset: Asset used by get_account_balance when none is given
        """
        self._http = http_client
        self._builder = RequestBuilder(base_url)
        self._default_asset = default_asset

    @property
    def default_asset(self) -> str:
        return self._default_asset

    async def _public(
        self,
        endpoint: PublicEndpoint,
        params: Mapping[str, ParamValue] | None = None,
    ) -> Any:
        return await self._http.send(self._builder.build_public(endpoint, params))

    async def _signed(
        self,
        endpoint: SignedEndpoint,
        account: Account,
        params: Mapping[str, ParamValue] | None = None,
    ) -> Any:
        return await self._http.send(self._builder.build_signed(endpoint, account, params))

    # ------------------------------------------------------------------
    # User data stream
    # ------------------------------------------------------------------

    async def get_listen_key(self, account: Account) -> dict[str, Any]:
        """Start a user data stream; response holds ``listenKey``."""
        return await self._signed(LISTEN_KEY_CREATE, account)

    async def extend_listen_key(self, account: Account) -> dict[str, Any]:
        """Keep the user data stream alive for another 60 minutes."""
        return await self._signed(LISTEN_KEY_EXTEND, account)

    async def close_listen_key(self, account: Account) -> dict[str, Any]:
        return await self._signed(LISTEN_KEY_CLOSE, account)

    # ------------------------------------------------------------------
    # Market data
    # ------------------------------------------------------------------

    async def get_exchange_data(self) -> list[dict[str, Any]]:
        """Get tradable symbol descriptors from exchange info."""
        response = await self._public(EXCHANGE_INFO)
        return response["symbols"]

    async def get_symbol_price(self, symbol: str) -> float:
        """Get latest price for a symbol.

        Args:
            symbol: Trading pair (e.g., "BTCUSDT")

        Returns:
            Price as float
        """
        response = await self._public(TICKER_PRICE, {"symbol": symbol})
        return float(response["price"])

    # ------------------------------------------------------------------
    # Account
    # ------------------------------------------------------------------

    async def get_account_balance(
        self, account: Account, asset: str | None = None
    ) -> dict[str, Any] | None:
        """Get the balance entry for one asset.

        Args:
            account: Account to query
            asset: Asset code, defaults to the catalog's default asset

        Returns:
            Balance entry, or None if the account holds no such asset
        """
        asset = asset or self._default_asset
        response = await self._signed(BALANCE, account)
        balance = find_first(response, lambda entry: entry["asset"] == asset)
        if balance is None:
            logger.debug(f"No {asset} balance for account {account.id}")
        return balance

    async def get_account_info(self, account: Account) -> dict[str, Any]:
        return await self._signed(ACCOUNT_INFO, account)

    async def get_income_history(
        self,
        account: Account,
        income_params: Mapping[str, ParamValue] | None = None,
    ) -> list[dict[str, Any]]:
        """Get income history; filters are passed through verbatim."""
        return await self._signed(INCOME_HISTORY, account, income_params)

    # ------------------------------------------------------------------
    # Orders
    # ------------------------------------------------------------------

    async def create_new_order(
        self, account: Account, order_params: Mapping[str, ParamValue]
    ) -> dict[str, Any]:
        """Place an order.

        Args:
            account: Account to trade on
            order_params: Order fields as the exchange names them
                (symbol, side, type, quantity, price, reduceOnly, ...)

        Returns:
            Order response
        """
        logger.info(
            f"New order on account {account.id}: "
            f"{order_params.get('side')} {order_params.get('quantity')} {order_params.get('symbol')}"
        )
        return await self._signed(NEW_ORDER, account, order_params)

    async def create_batch_orders(
        self, account: Account, orders: Sequence[Mapping[str, Any]]
    ) -> list[dict[str, Any]]:
        """Place up to five orders in one call."""
        return await self._signed(NEW_BATCH_ORDERS, account, {"batchOrders": list(orders)})

    async def cancel_order(
        self, account: Account, symbol: str, order_id: str | int
    ) -> dict[str, Any]:
        return await self._signed(
            CANCEL_ORDER, account, {"symbol": symbol, "orderId": order_id}
        )

    async def cancel_all_orders(self, account: Account, symbol: str) -> dict[str, Any]:
        return await self._signed(CANCEL_ALL_OPEN_ORDERS, account, {"symbol": symbol})

    async def cancel_multiple_orders(
        self, account: Account, symbol: str, order_id_list: Sequence[str | int]
    ) -> list[dict[str, Any]]:
        """Cancel several orders of one symbol by exchange order id."""
        return await self._signed(
            CANCEL_BATCH_ORDERS,
            account,
            {"symbol": symbol, "orderIdList": [int(order_id) for order_id in order_id_list]},
        )

    async def get_all_orders(
        self, account: Account, order_params: Mapping[str, ParamValue]
    ) -> list[dict[str, Any]]:
        """Get order history; filters are passed through verbatim."""
        return await self._signed(ALL_ORDERS, account, order_params)

    async def get_all_open_orders(
        self, account: Account, symbol: str = ""
    ) -> list[dict[str, Any]]:
        """Get open orders, for one symbol or for all when symbol is empty."""
        params = {"symbol": symbol} if symbol else {}
        return await self._signed(OPEN_ORDERS, account, params)

    # ------------------------------------------------------------------
    # Leverage, margin and position mode
    # ------------------------------------------------------------------

    async def get_leverage(self, account: Account, symbol: str) -> int:
        """Get current leverage for a symbol.

        Unlike get_account_balance, a missing entry is an error: every
        tradable symbol has a position entry, so its absence means the
        symbol is wrong.

        Raises:
            LeverageNotFoundError: If no position matches the symbol
        """
        response = await self._signed(ACCOUNT_INFO, account)
        position = find_first(
            response["positions"], lambda entry: entry["symbol"] == symbol
        )
        if position is None:
            raise LeverageNotFoundError(symbol)
        return int(position["leverage"])

    async def set_leverage(
        self, account: Account, symbol: str, leverage: int
    ) -> dict[str, Any]:
        logger.info(f"Setting leverage for {symbol} to {leverage}x on account {account.id}")
        return await self._signed(
            SET_LEVERAGE, account, {"symbol": symbol, "leverage": leverage}
        )

    async def get_position_mode(self, account: Account) -> bool:
        """Return True if the account is in hedge (dual side) mode."""
        response = await self._signed(GET_POSITION_MODE, account)
        return bool(response["dualSidePosition"])

    async def set_position_mode(
        self, account: Account, dual_side: bool | str
    ) -> dict[str, Any]:
        """Switch between hedge mode (True) and one-way mode (False)."""
        return await self._signed(
            SET_POSITION_MODE, account, {"dualSidePosition": dual_side}
        )

    async def set_margin_type(
        self, account: Account, symbol: str, margin_type: str
    ) -> dict[str, Any]:
        """Set margin type ("ISOLATED" or "CROSSED") for a symbol."""
        return await self._signed(
            SET_MARGIN_TYPE,
            account,
            {"symbol": symbol, "marginType": margin_type},
        )

    async def modify_isolated_margin(
        self,
        account: Account,
        symbol: str,
        amount: float,
        position_side: str | None = None,
    ) -> dict[str, Any]:
        """Add (positive amount) or remove (negative amount) isolated margin.

        Raises:
            ValueError: If amount is zero
        """
        if amount == 0:
            raise ValueError("amount must be non-zero")
        params: dict[str, ParamValue] = {
            "symbol": symbol,
            "amount": abs(amount),
            "type": MARGIN_ADD if amount > 0 else MARGIN_REDUCE,
        }
        if position_side:
            params["positionSide"] = position_side.upper()
        return await self._signed(POSITION_MARGIN, account, params)

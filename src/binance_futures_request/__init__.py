"""Signed request client for the Binance USDS-M Futures REST API."""

from binance_futures_request.account import Account
from binance_futures_request.client import FuturesHttpClient
from binance_futures_request.endpoints import FuturesRequest
from binance_futures_request.errors import FuturesRequestError, LeverageNotFoundError
from binance_futures_request.request import (
    PreparedRequest,
    PublicEndpoint,
    RequestBuilder,
    SignedEndpoint,
)

__all__ = [
    "Account",
    "FuturesHttpClient",
    "FuturesRequest",
    "FuturesRequestError",
    "LeverageNotFoundError",
    "PreparedRequest",
    "PublicEndpoint",
    "RequestBuilder",
    "SignedEndpoint",
]

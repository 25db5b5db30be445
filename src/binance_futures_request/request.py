"""Endpoint declarations and the request builder.

Whether a call is signed is decided by the type of its endpoint declaration:
a :class:`PublicEndpoint` can only go through :meth:`RequestBuilder.build_public`
and a :class:`SignedEndpoint` only through :meth:`RequestBuilder.build_signed`,
which requires an :class:`Account`.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Literal

from binance_futures_request.account import Account
from binance_futures_request.signing import ParamValue, canonicalize

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-MBX-APIKEY"

HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]


@dataclass(frozen=True)
class PublicEndpoint:
    """Unauthenticated endpoint: no signature, no API key header."""

    method: HttpMethod
    path: str


@dataclass(frozen=True)
class SignedEndpoint:
    """Authenticated endpoint: signed query plus API key header."""

    method: HttpMethod
    path: str


@dataclass(frozen=True)
class PreparedRequest:
    """Transport-ready request description."""

    method: HttpMethod
    url: str
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def query_string(self) -> str:
        _, _, query = self.url.partition("?")
        return query


class RequestBuilder:
    """Turns endpoint declarations and parameters into prepared requests.

    Performs no network I/O.
    """

    def __init__(self, base_url: str) -> None:
        """Initialize request builder.

        Args:
            base_url: Exchange REST host, e.g. "https://fapi.binance.com"
        """
        self._base_url = base_url.rstrip("/")

    @property
    def base_url(self) -> str:
        return self._base_url

    def build_public(
        self,
        endpoint: PublicEndpoint,
        params: Mapping[str, ParamValue] | None = None,
    ) -> PreparedRequest:
        """Build an unauthenticated request (timestamp only)."""
        canonical = canonicalize(params)
        logger.debug(f"{endpoint.method} {endpoint.path} (public)")
        return PreparedRequest(
            method=endpoint.method,
            url=self._url(endpoint.path, canonical.query_string),
        )

    def build_signed(
        self,
        endpoint: SignedEndpoint,
        account: Account,
        params: Mapping[str, ParamValue] | None = None,
    ) -> PreparedRequest:
        """Build a signed request carrying the account's API key header."""
        canonical = canonicalize(params, account)
        logger.debug(
            f"{endpoint.method} {endpoint.path} (account {account.id}, {account.fingerprint()})"
        )
        return PreparedRequest(
            method=endpoint.method,
            url=self._url(endpoint.path, canonical.query_string),
            headers={API_KEY_HEADER: account.api_key},
        )

    def _url(self, path: str, query_string: str) -> str:
        return f"{self._base_url}{path}?{query_string}"

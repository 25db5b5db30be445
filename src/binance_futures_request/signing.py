"""Parameter canonicalization and HMAC request signing.

The exchange authenticates a request by an HMAC-SHA256 signature over the
query string. The string that is signed must be byte-for-byte the string
that is sent, so canonicalization produces both the final parameter list and
the encoded query in one pass, and nothing touches the parameters afterwards.
"""

import hashlib
import hmac
import json
import time
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any
from urllib.parse import urlencode

from binance_futures_request.account import Account

ParamValue = str | int | float | bool | list[Any] | tuple[Any, ...]


@dataclass(frozen=True)
class CanonicalParams:
    """Final ordered parameters and their encoded query string."""

    params: list[tuple[str, str | int]]
    query_string: str

    def as_dict(self) -> dict[str, str | int]:
        return dict(self.params)


def current_timestamp_ms() -> int:
    """Wall-clock time in whole milliseconds since the Unix epoch."""
    return int(time.time() * 1000)


def canonical_value(value: ParamValue) -> str | int:
    """Convert a parameter value to the form the exchange accepts.

    Booleans become the literal strings ``"true"``/``"false"`` and floats are
    written in fixed-point notation (never ``1e-05``). Sequences
    (``orderIdList``, ``batchOrders``) are sent as compact JSON arrays whose
    members get the same treatment.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return format(Decimal(str(value)), "f")
    if isinstance(value, (list, tuple)):
        return json.dumps([_json_member(item) for item in value], separators=(",", ":"))
    return value


def _json_member(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {name: _json_member(item) for name, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_member(item) for item in value]
    if isinstance(value, (bool, float)):
        return canonical_value(value)
    return value


def sign(secret: str, query_string: str) -> str:
    """Lowercase hex HMAC-SHA256 of query_string keyed by secret."""
    return hmac.new(
        secret.encode("utf-8"),
        query_string.encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()


def canonicalize(
    params: Mapping[str, ParamValue] | None = None,
    account: Account | None = None,
    timestamp: int | None = None,
) -> CanonicalParams:
    """Build the final parameter set for a request.

    Caller parameters keep their insertion order, ``timestamp`` follows them,
    and ``signature`` comes last when an account is given. The input mapping
    is not modified.

    Args:
        params: Caller-supplied request parameters
        account: Account to sign with, or None for unauthenticated calls
        timestamp: Override for the injected timestamp (ms)

    Returns:
        CanonicalParams whose query_string is what goes on the wire
    """
    ordered: list[tuple[str, str | int]] = [
        (name, canonical_value(value)) for name, value in (params or {}).items()
        if name not in ("timestamp", "signature")
    ]
    ordered.append(
        ("timestamp", current_timestamp_ms() if timestamp is None else timestamp)
    )

    query_string = urlencode(ordered)
    if account is not None:
        signature = sign(account.api_secret, query_string)
        ordered.append(("signature", signature))
        query_string = f"{query_string}&signature={signature}"

    return CanonicalParams(params=ordered, query_string=query_string)

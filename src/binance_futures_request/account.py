"""Exchange account credentials."""

import hashlib
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Account:
    """Account identity and API key pair.

    Key and secret are excluded from ``repr`` so an account can be logged
    safely; use :meth:`fingerprint` to identify it in diagnostics.
    """

    id: int
    name: str
    api_key: str = field(repr=False)
    api_secret: str = field(repr=False)

    def fingerprint(self) -> str:
        """One-way hash of name, key and secret.

        Stable across calls and processes. Used for identification only,
        never for authentication.
        """
        raw = f"{self.name}{self.api_key}{self.api_secret}"
        return hashlib.md5(raw.encode("utf-8")).hexdigest()

    def __str__(self) -> str:
        return self.fingerprint()

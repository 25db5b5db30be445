"""Exceptions raised by the futures request client."""


class FuturesRequestError(Exception):
    """Base error for this package."""


class LeverageNotFoundError(FuturesRequestError):
    """No position entry for the requested symbol in the account info."""

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"Cannot get correct leverage: no position for {symbol}")

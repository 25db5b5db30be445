"""Small helpers shared by response transforms."""

from collections.abc import Callable, Iterable
from typing import TypeVar

T = TypeVar("T")


def find_first(items: Iterable[T], predicate: Callable[[T], bool]) -> T | None:
    """Return the first item matching predicate, or None."""
    for item in items:
        if predicate(item):
            return item
    return None

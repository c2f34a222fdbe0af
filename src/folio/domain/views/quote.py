"""Normalized quote record shared by every provider."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Quote:
    """
    A price observation for one symbol.

    Immutable once produced. Providers only hand out quotes with a positive
    price; anything else is raised as a ProviderError instead.
    """

    symbol: str
    price: Decimal
    currency: str
    source: str

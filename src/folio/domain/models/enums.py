"""Enumerations for domain models."""

from enum import Enum


class AssetClass(str, Enum):
    """Holding categories; the asset class picks the quote provider and cache TTL."""

    EQUITY = "equity"
    FUND = "fund"
    CRYPTO = "crypto"
    COMMODITY = "commodity"

    @classmethod
    def from_tag(cls, tag: "str | AssetClass") -> "AssetClass":
        """
        Parse an asset-class tag case-insensitively.

        Older records use "stock" and "mutual_fund"; both map onto the
        current classes. Raises ValueError for anything else.
        """
        if isinstance(tag, AssetClass):
            return tag
        normalized = (tag or "").strip().lower()
        normalized = _LEGACY_TAGS.get(normalized, normalized)
        return cls(normalized)

    @property
    def is_crypto(self) -> bool:
        return self is AssetClass.CRYPTO


_LEGACY_TAGS = {
    "stock": "equity",
    "mutual_fund": "fund",
}

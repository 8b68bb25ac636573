"""Bitrue spot catalog adapter."""

from __future__ import annotations

from .base import BaseCatalogAdapter
from .normalization import SymbolConvention


class BitrueAdapter(BaseCatalogAdapter):
    """Bitrue exchangeInfo.

    Bitrue reports asset names in lower case and spells symbols ``btcusdt``.
    """

    name = "bitrue"
    display_name = "Bitrue"
    default_url = "https://www.bitrue.com/api/v1/exchangeInfo"
    default_convention = SymbolConvention(separator="", casing="lower")

    records_path = ("symbols",)
    base_field = "baseAsset"
    quote_field = "quoteAsset"
    status_field = "status"
    tradable_values = frozenset({"TRADING"})

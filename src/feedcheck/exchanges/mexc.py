"""MEXC spot catalog adapter."""

from __future__ import annotations

from .base import BaseCatalogAdapter
from .normalization import SymbolConvention


class MEXCAdapter(BaseCatalogAdapter):
    """MEXC v3 exchangeInfo.

    MEXC reports status "1" for online symbols; older responses use
    "ENABLED".
    """

    name = "mexc"
    display_name = "MEXC"
    default_url = "https://api.mexc.com/api/v3/exchangeInfo"
    default_convention = SymbolConvention(separator="_")

    records_path = ("symbols",)
    base_field = "baseAsset"
    quote_field = "quoteAsset"
    status_field = "status"
    tradable_values = frozenset({"1", "ENABLED"})

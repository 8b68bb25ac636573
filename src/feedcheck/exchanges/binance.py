"""Binance and Binance.US spot catalog adapters."""

from __future__ import annotations

from .base import BaseCatalogAdapter
from .normalization import SymbolConvention


class BinanceAdapter(BaseCatalogAdapter):
    """Binance spot exchangeInfo, instruments under ``symbols``."""

    name = "binance"
    display_name = "Binance"
    default_url = "https://api.binance.com/api/v3/exchangeInfo"
    default_convention = SymbolConvention(separator="")

    records_path = ("symbols",)
    base_field = "baseAsset"
    quote_field = "quoteAsset"
    status_field = "status"
    tradable_values = frozenset({"TRADING"})


class BinanceUSAdapter(BinanceAdapter):
    """Binance.US shares the Binance exchangeInfo shape."""

    name = "binanceus"
    display_name = "Binance US"
    default_url = "https://api.binance.us/api/v3/exchangeInfo"

"""Coinbase Exchange catalog adapter."""

from __future__ import annotations

from typing import Any

from .base import BaseCatalogAdapter
from .normalization import SymbolConvention


class CoinbaseAdapter(BaseCatalogAdapter):
    """Coinbase Exchange products.

    A product is tradable only when it is online and trading is not disabled.
    """

    name = "coinbase"
    display_name = "Coinbase"
    default_url = "https://api.exchange.coinbase.com/products"
    default_convention = SymbolConvention(separator="-")

    base_field = "base_currency"
    quote_field = "quote_currency"
    status_field = "status"
    tradable_values = frozenset({"online"})

    def is_tradable(self, record: Any) -> bool:
        return super().is_tradable(record) and record.get("trading_disabled") is False

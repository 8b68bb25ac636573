"""Bitstamp catalog adapter."""

from __future__ import annotations

from typing import Any

from .base import BaseCatalogAdapter
from .normalization import SymbolConvention, split_pair


class BitstampAdapter(BaseCatalogAdapter):
    """Bitstamp trading pairs info.

    Records name the pair as ``"BTC/USD"``; the exchange symbol is the
    lower-case ``url_symbol`` (``btcusd``).
    """

    name = "bitstamp"
    display_name = "Bitstamp"
    default_url = "https://www.bitstamp.net/api/v2/trading-pairs-info/"
    default_convention = SymbolConvention(separator="", casing="lower")

    pair_field = "name"
    status_field = "trading"
    tradable_values = frozenset({"Enabled"})

    def extract_pair(self, record: Any) -> tuple[str, str] | None:
        if not isinstance(record, dict) or not isinstance(record.get(self.pair_field), str):
            return None
        return split_pair(record[self.pair_field])

"""Kraken catalog adapter."""

from __future__ import annotations

from typing import Any, Iterable

from .base import BaseCatalogAdapter
from .normalization import SymbolConvention, split_pair

# Kraken's legacy asset codes that differ from the common ticker.
ASSET_ALIASES = {
    "XBT": "BTC",
    "XDG": "DOGE",
}


class KrakenAdapter(BaseCatalogAdapter):
    """Kraken AssetPairs.

    Pairs are a mapping under ``result`` keyed by Kraken's internal pair code.
    The websocket name (``XBT/USD``) carries the readable base and quote.
    """

    name = "kraken"
    display_name = "Kraken"
    default_url = "https://api.kraken.com/0/public/AssetPairs"
    default_convention = SymbolConvention(separator="/")

    pair_field = "wsname"
    status_field = "status"
    tradable_values = frozenset({"online"})

    def check_envelope(self, payload: Any) -> None:
        if not isinstance(payload, dict):
            raise self._malformed(f"expected an object, got {type(payload).__name__}")
        if payload.get("error"):
            raise self._malformed(f"API error: {', '.join(map(str, payload['error']))}")

    def records(self, payload: Any) -> Iterable[Any]:
        result = payload.get("result")
        if not isinstance(result, dict):
            raise self._malformed("missing 'result' in response")
        return list(result.values())

    def extract_pair(self, record: Any) -> tuple[str, str] | None:
        if not isinstance(record, dict) or not isinstance(record.get(self.pair_field), str):
            return None
        base, quote = split_pair(record[self.pair_field])
        return ASSET_ALIASES.get(base, base), ASSET_ALIASES.get(quote, quote)

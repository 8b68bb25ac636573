"""KuCoin spot catalog adapter."""

from __future__ import annotations

from typing import Any

from .base import BaseCatalogAdapter
from .normalization import SymbolConvention


class KuCoinAdapter(BaseCatalogAdapter):
    """KuCoin spot symbols, nested under ``data`` with a boolean trading flag."""

    name = "kucoin"
    display_name = "KuCoin"
    default_url = "https://api.kucoin.com/api/v1/symbols"
    default_convention = SymbolConvention(separator="-")

    records_path = ("data",)
    base_field = "baseCurrency"
    quote_field = "quoteCurrency"
    status_field = "enableTrading"
    tradable_values = frozenset({True})

    def check_envelope(self, payload: Any) -> None:
        if isinstance(payload, dict) and str(payload.get("code", "200000")) != "200000":
            raise self._malformed(f"API error {payload.get('code')}: {payload.get('msg', '')}")

"""Bybit spot catalog adapter."""

from __future__ import annotations

from typing import Any

from .base import BaseCatalogAdapter
from .normalization import SymbolConvention


class BybitAdapter(BaseCatalogAdapter):
    """Bybit v5 spot instruments, nested under ``result.list``."""

    name = "bybit"
    display_name = "Bybit"
    default_url = "https://api.bybit.com/v5/market/instruments-info?category=spot"
    default_convention = SymbolConvention(separator="")

    records_path = ("result", "list")
    base_field = "baseCoin"
    quote_field = "quoteCoin"
    status_field = "status"
    tradable_values = frozenset({"Trading"})

    def check_envelope(self, payload: Any) -> None:
        if isinstance(payload, dict) and payload.get("retCode", 0) != 0:
            raise self._malformed(f"API error {payload.get('retCode')}: {payload.get('retMsg', '')}")

"""OKX spot catalog adapter."""

from __future__ import annotations

from typing import Any

from .base import BaseCatalogAdapter
from .normalization import SymbolConvention


class OKXAdapter(BaseCatalogAdapter):
    """OKX public spot instruments, nested under ``data``."""

    name = "okx"
    display_name = "OKX"
    default_url = "https://www.okx.com/api/v5/public/instruments?instType=SPOT"
    default_convention = SymbolConvention(separator="-")

    records_path = ("data",)
    base_field = "baseCcy"
    quote_field = "quoteCcy"
    status_field = "state"
    tradable_values = frozenset({"live"})

    def check_envelope(self, payload: Any) -> None:
        if isinstance(payload, dict) and str(payload.get("code", "0")) != "0":
            raise self._malformed(f"API error {payload.get('code')}: {payload.get('msg', '')}")

"""Gate.io spot catalog adapter."""

from __future__ import annotations

from .base import BaseCatalogAdapter
from .normalization import SymbolConvention


class GateIOAdapter(BaseCatalogAdapter):
    """Gate.io spot currency pairs.

    Response is a flat list: ``[{"id": "BTC_USDT", "base": "BTC",
    "quote": "USDT", "trade_status": "tradable"}, ...]``.
    """

    name = "gateio"
    display_name = "Gate.io"
    default_url = "https://api.gateio.ws/api/v4/spot/currency_pairs"
    default_convention = SymbolConvention(separator="_")

    base_field = "base"
    quote_field = "quote"
    status_field = "trade_status"
    tradable_values = frozenset({"tradable"})

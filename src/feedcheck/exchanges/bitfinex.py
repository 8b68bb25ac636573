"""Bitfinex catalog adapter."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from .base import BaseCatalogAdapter
from .normalization import SymbolConvention

logger = logging.getLogger(__name__)


class BitfinexAdapter(BaseCatalogAdapter):
    """Bitfinex public tickers.

    The response is a list of arrays whose first element is the symbol:
    ``tBTCUSD`` for trading pairs, ``tDOGE:USD`` when an asset code is longer
    than three characters, ``fUSD`` for funding currencies. Every listed
    trading ticker is open for trading.
    """

    name = "bitfinex"
    display_name = "Bitfinex"
    default_url = "https://api-pub.bitfinex.com/v2/tickers?symbols=ALL"
    default_convention = SymbolConvention(separator="")

    def records(self, payload: Any) -> Iterable[Any]:
        if not isinstance(payload, list):
            raise self._malformed(f"expected a list of tickers, got {type(payload).__name__}")
        return payload

    def extract_pair(self, record: Any) -> tuple[str, str] | None:
        if not isinstance(record, list) or not record or not isinstance(record[0], str):
            return None

        symbol = record[0]
        if not symbol.startswith("t"):
            return None

        symbol = symbol[1:]
        if ":" in symbol:
            base, _, quote = symbol.partition(":")
            return base, quote
        if len(symbol) == 6:
            return symbol[:3], symbol[3:]

        logger.debug("bitfinex: cannot split ticker symbol %s", symbol)
        return None

    def is_tradable(self, record: Any) -> bool:
        return True

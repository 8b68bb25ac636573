"""Symbol normalization utilities for exchange symbols."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from .protocol import ExchangeInstrument

logger = logging.getLogger(__name__)

SEPARATORS = ("", "-", "/", "_")
CASINGS = ("upper", "lower", "preserve")


@dataclass(frozen=True, slots=True)
class SymbolConvention:
    """How an exchange spells a pair: separator between assets plus casing."""

    separator: str = ""
    casing: str = "upper"

    def __post_init__(self) -> None:
        if self.separator not in SEPARATORS:
            raise ValueError(f"Unsupported separator: {self.separator!r}")
        if self.casing not in CASINGS:
            raise ValueError(f"Unsupported casing: {self.casing!r}")


def to_exchange_symbol(base: str, quote: str, convention: SymbolConvention) -> str:
    """Build the literal symbol an exchange uses for a pair.

    - ("BTC", "USDT", "_" upper) -> BTC_USDT
    - ("BTC", "USDT", "" lower)  -> btcusdt
    - ("BTC", "USD", "-" upper)  -> BTC-USD
    """
    symbol = f"{base}{convention.separator}{quote}"
    if convention.casing == "upper":
        return symbol.upper()
    if convention.casing == "lower":
        return symbol.lower()
    return symbol


def build_symbol_set(instruments: Iterable["ExchangeInstrument"], convention: SymbolConvention) -> frozenset[str]:
    """Literal symbols of every tradable instrument."""
    symbols = frozenset(
        to_exchange_symbol(inst.base, inst.quote, convention)
        for inst in instruments
        if inst.tradable
    )
    logger.debug("built %d exchange symbols", len(symbols))
    return symbols


def split_pair(name: str) -> tuple[str, str]:
    """Split a canonical pair name on the first '/'.

    - BTC/USD -> (BTC, USD)
    - btc/usdt -> (BTC, USDT)
    - BTC -> (BTC, '')

    Returns:
        Tuple of (base, quote), upper-cased
    """
    if not name:
        return "", ""

    base, _, quote = name.partition("/")
    return base.strip().upper(), quote.strip().upper()

"""Matching feed base symbols against an exchange's tradable symbols."""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Iterable, Sequence

from .exchanges.normalization import SymbolConvention, to_exchange_symbol


@dataclass(frozen=True, slots=True)
class MatchResult:
    """A feed pair confirmed tradable on an exchange."""

    base: str
    quote: str
    symbol: str

    @property
    def pair(self) -> str:
        return f"{self.base}/{self.quote}"


def match_pairs(
    bases: Iterable[str],
    quotes: Sequence[str],
    convention: SymbolConvention,
    symbols: AbstractSet[str],
) -> list[MatchResult]:
    """Return every (base, quote) whose exchange symbol is in ``symbols``.

    Bases are visited in sorted order and quotes in the given order. Support
    for one quote says nothing about another.
    """
    matches: list[MatchResult] = []
    for base in sorted(bases):
        for quote in quotes:
            symbol = to_exchange_symbol(base, quote, convention)
            if symbol in symbols:
                matches.append(MatchResult(base, quote, symbol))
    return matches

"""Validation of pass results and rendering of the coverage report."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Iterable, Sequence

from .errors import EXCHANGE_CATALOG, FEED_CATALOG, EmptyCatalog, NoMatches
from .matcher import MatchResult

if TYPE_CHECKING:
    from .runtime import PassResult


def validate_catalogs(
    feed_count: int,
    symbol_count: int,
    *,
    exchange: str,
    feeds_url: str | None = None,
    exchange_url: str | None = None,
) -> None:
    """Fail when either source catalog is empty; feed catalog is checked first.

    ``symbol_count`` counts tradable exchange symbols only, so a catalog listing
    nothing open for trading is empty.
    """
    if feed_count == 0:
        raise EmptyCatalog("no feed base symbols", exchange=exchange, catalog=FEED_CATALOG, url=feeds_url)
    if symbol_count == 0:
        raise EmptyCatalog("no tradable instruments", exchange=exchange, catalog=EXCHANGE_CATALOG, url=exchange_url)


def validate_matches(matches: Sequence[MatchResult], *, exchange: str, feed_count: int = 0) -> None:
    if not matches:
        raise NoMatches(f"{feed_count} feed base symbols checked", exchange=exchange)


def format_pair(match: MatchResult) -> str:
    return f'"{match.pair}",'


def render_pass(result: "PassResult") -> list[str]:
    """Stdout lines for one pass.

    Failures before matching produce no lines; a pass without matches still
    prints its header.
    """
    header = f"[{result.display_name.upper()} – SUPPORTED TRADE PAIRS]"

    if result.ok:
        return [
            header,
            "",
            *(format_pair(match) for match in result.matches),
            "",
            f"✅ {len(result.matches)} supported {result.display_name} trade pairs found",
        ]

    if isinstance(result.error, NoMatches):
        return [
            header,
            "",
            "",
            f"❌ No supported {result.display_name} trade pairs found",
        ]

    return []


def render_failure(result: "PassResult") -> str | None:
    """Stderr diagnostic for a pass that failed before producing a report."""
    if result.error is None or isinstance(result.error, NoMatches):
        return None
    return f"❌ {result.error}"


def render_text(results: Iterable["PassResult"]) -> str:
    blocks = ["\n".join(lines) for lines in map(render_pass, results) if lines]
    return "\n\n".join(blocks)


def render_json(results: Iterable["PassResult"]) -> str:
    """Successful passes as collector-style exchange entries."""
    document = [
        {
            "name": result.exchange,
            "pairs": {
                "trades": [match.pair for match in result.matches],
                "orderbooks": [],
            },
            "symbols": [match.symbol for match in result.matches],
        }
        for result in results
        if result.ok
    ]
    return json.dumps(document, indent=2)

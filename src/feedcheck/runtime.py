from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Sequence

from .errors import EXCHANGE_CATALOG, ExitCode, FeedCheckError, MalformedResponse
from .exchanges.base import BaseCatalogAdapter
from .exchanges.normalization import build_symbol_set
from .feeds import FeedCatalog, FeedCatalogLoader
from .matcher import MatchResult, match_pairs
from .report import validate_catalogs, validate_matches

logger = logging.getLogger(__name__)


class PassState(str, Enum):
    FETCHING = "fetching"
    VALIDATING = "validating"
    MATCHING = "matching"
    REPORTING = "reporting"
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass
class PassResult:
    """Outcome of one exchange's fetch-normalize-match-report cycle."""

    exchange: str
    display_name: str
    url: str
    state: PassState = PassState.FETCHING
    matches: list[MatchResult] = field(default_factory=list)
    feed_count: int = 0
    instrument_count: int = 0
    error: FeedCheckError | None = None

    @property
    def ok(self) -> bool:
        return self.state is PassState.SUCCESS

    @property
    def exit_code(self) -> ExitCode:
        if self.ok:
            return ExitCode.OK
        if self.error is None:
            return ExitCode.MIXED_FAILURES
        return self.error.exit_code

    def advance(self, state: PassState) -> None:
        logger.debug("%s: %s -> %s", self.exchange, self.state.value, state.value)
        self.state = state


async def run_pass(
    adapter: BaseCatalogAdapter,
    feeds: FeedCatalog,
    quotes: Sequence[str],
) -> PassResult:
    """Run one exchange pass; failures are captured in the result."""
    result = PassResult(adapter.name, adapter.display_name, adapter.url)
    result.feed_count = len(feeds)

    try:
        instruments = list(await adapter.fetch())
        result.instrument_count = len(instruments)

        result.advance(PassState.VALIDATING)
        symbols = build_symbol_set(instruments, adapter.convention)
        validate_catalogs(
            result.feed_count,
            len(symbols),
            exchange=adapter.name,
            feeds_url=feeds.url,
            exchange_url=adapter.url,
        )

        result.advance(PassState.MATCHING)
        result.matches = match_pairs(feeds.bases, quotes, adapter.convention, symbols)

        result.advance(PassState.REPORTING)
        validate_matches(result.matches, exchange=adapter.name, feed_count=result.feed_count)
        result.advance(PassState.SUCCESS)
        logger.info(
            "%s: %d of %d instruments tradable, %d feed pairs supported",
            adapter.name,
            len(symbols),
            result.instrument_count,
            len(result.matches),
        )
    except FeedCheckError as exc:
        result.error = exc
        result.advance(PassState.FAILURE)
        logger.warning("%s pass failed: %s", adapter.name, exc)
    except Exception as exc:
        # Unexpected record shapes fail this exchange only.
        logger.exception("%s: unexpected error while parsing catalog", adapter.name)
        result.error = MalformedResponse(
            f"{type(exc).__name__}: {exc}", exchange=adapter.name, catalog=EXCHANGE_CATALOG, url=adapter.url
        )
        result.advance(PassState.FAILURE)
    finally:
        await adapter.close()

    return result


async def load_feeds(url: str, *, timeout: float) -> FeedCatalog:
    loader = FeedCatalogLoader(url, timeout=timeout)
    try:
        return await loader.load()
    finally:
        await loader.close()


async def run_checks(
    adapters: Mapping[str, BaseCatalogAdapter],
    *,
    feeds_url: str,
    quotes: Sequence[str],
    timeout: float,
) -> list[PassResult]:
    """Load the feed catalog once, then run every exchange pass concurrently.

    Results are returned in the order of ``adapters``.

    Raises:
        FeedCheckError: the feed catalog could not be loaded
    """
    logger.info("checking %d exchanges against quotes %s", len(adapters), ", ".join(quotes))
    feeds = await load_feeds(feeds_url, timeout=timeout)

    results = await asyncio.gather(
        *(run_pass(adapter, feeds, quotes) for adapter in adapters.values())
    )
    return list(results)


def aggregate_exit_code(results: Sequence[PassResult]) -> ExitCode:
    """Zero when every pass succeeded; a shared failure code; otherwise 1."""
    codes = {result.exit_code for result in results if not result.ok}
    if not codes:
        return ExitCode.OK
    if len(codes) == 1:
        return codes.pop()
    return ExitCode.MIXED_FAILURES

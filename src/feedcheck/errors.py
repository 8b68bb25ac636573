"""Error types raised while checking feed coverage."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit status consumed by CI."""

    OK = 0
    MIXED_FAILURES = 1
    SOURCE_UNREACHABLE = 3
    MALFORMED_RESPONSE = 4
    EMPTY_FEED_CATALOG = 5
    EMPTY_EXCHANGE_CATALOG = 6
    NO_MATCHES = 7


FEED_CATALOG = "feed"
EXCHANGE_CATALOG = "exchange"


class FeedCheckError(Exception):
    """Base class for failures that end a pass.

    Args:
        detail: Human readable condition
        exchange: Exchange the pass belongs to (None for the feed catalog)
        catalog: Which catalog failed ('feed' or 'exchange')
        url: Resource that was being processed
    """

    exit_code: ExitCode = ExitCode.MIXED_FAILURES
    condition = "check failed"

    def __init__(
        self,
        detail: str = "",
        *,
        exchange: str | None = None,
        catalog: str | None = None,
        url: str | None = None,
    ):
        self.detail = detail
        self.exchange = exchange
        self.catalog = catalog
        self.url = url
        super().__init__(self._format())

    def _format(self) -> str:
        parts = []
        if self.exchange:
            parts.append(self.exchange)
        if self.catalog:
            parts.append(f"{self.catalog} catalog")
        prefix = " ".join(parts)
        message = f"{prefix}: {self.condition}" if prefix else self.condition
        if self.detail:
            message = f"{message} ({self.detail})"
        if self.url:
            message = f"{message} [{self.url}]"
        return message


class SourceUnreachable(FeedCheckError):
    """Transport failure, timeout or non-200 status while fetching a catalog."""

    exit_code = ExitCode.SOURCE_UNREACHABLE
    condition = "source unreachable"


class MalformedResponse(FeedCheckError):
    """Catalog body received but not in the expected shape."""

    exit_code = ExitCode.MALFORMED_RESPONSE
    condition = "malformed response"


class EmptyCatalog(FeedCheckError):
    """Catalog parsed but yielded no usable entries."""

    condition = "no usable entries"

    @property
    def exit_code(self) -> ExitCode:  # type: ignore[override]
        if self.catalog == FEED_CATALOG:
            return ExitCode.EMPTY_FEED_CATALOG
        return ExitCode.EMPTY_EXCHANGE_CATALOG


class NoMatches(FeedCheckError):
    """Both catalogs are valid but no feed pair is tradable on the exchange."""

    exit_code = ExitCode.NO_MATCHES
    condition = "no supported trade pairs found"


class UnknownExchange(ValueError):
    """Requested exchange has no registered adapter."""

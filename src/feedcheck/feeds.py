"""Canonical feed catalog loading."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import aiohttp

from .errors import FEED_CATALOG, EmptyCatalog, MalformedResponse
from .exchanges.normalization import split_pair
from .http import create_session, fetch_json

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FeedCatalog:
    """Unique, sorted base symbols of the canonical feed list."""

    url: str
    bases: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.bases)


def _feed_name(entry: Any) -> str | None:
    if not isinstance(entry, dict):
        return None
    feed = entry.get("feed")
    if isinstance(feed, dict) and isinstance(feed.get("name"), str):
        return feed["name"]
    if isinstance(entry.get("name"), str):
        return entry["name"]
    return None


def parse_feed_bases(payload: Any, *, url: str | None = None) -> tuple[str, ...]:
    """Extract unique base symbols from a feed list.

    Each entry names a pair as ``BASE/REST``; only the part before the
    first '/' is kept.

    Raises:
        MalformedResponse: payload is not a list
        EmptyCatalog: no entry yields a base symbol
    """
    if not isinstance(payload, list):
        raise MalformedResponse(
            f"expected a list of feeds, got {type(payload).__name__}",
            catalog=FEED_CATALOG,
            url=url,
        )

    bases: set[str] = set()
    for entry in payload:
        name = _feed_name(entry)
        if name is None:
            logger.debug("skipping feed entry without name: %r", entry)
            continue
        base, _ = split_pair(name)
        if base:
            bases.add(base)

    if not bases:
        raise EmptyCatalog(f"{len(payload)} entries, no base symbols", catalog=FEED_CATALOG, url=url)

    return tuple(sorted(bases))


class FeedCatalogLoader:
    """Fetches the canonical feed list; always fresh, never cached."""

    def __init__(self, url: str, *, timeout: float = 10.0):
        self.url = url
        self.timeout = timeout
        self.session: aiohttp.ClientSession | None = None

    async def _ensure_session(self) -> aiohttp.ClientSession:
        if self.session is None:
            self.session = create_session(self.timeout)
        return self.session

    async def load(self) -> FeedCatalog:
        session = await self._ensure_session()
        payload = await fetch_json(session, self.url, catalog=FEED_CATALOG)
        bases = parse_feed_bases(payload, url=self.url)
        logger.info("loaded %d feed base symbols from %s", len(bases), self.url)
        return FeedCatalog(self.url, bases)

    async def close(self) -> None:
        if self.session:
            await self.session.close()
            self.session = None

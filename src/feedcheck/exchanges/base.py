"""Base class for exchange catalog adapters."""

from __future__ import annotations

import logging
from abc import ABC
from typing import Any, Iterable, Iterator

import aiohttp

from ..errors import EXCHANGE_CATALOG, MalformedResponse
from ..http import create_session, fetch_json
from .normalization import SymbolConvention
from .protocol import ExchangeInstrument

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0

# Adapter attributes that may be overridden per exchange from configuration.
FIELD_OPTIONS = frozenset({"base_field", "quote_field", "status_field", "tradable_values"})


class BaseCatalogAdapter(ABC):
    """Base class for all exchange catalog adapters.

    Most exchanges return a list of records carrying base, quote and a status
    field, possibly nested inside an envelope. Subclasses describe that shape
    with class attributes; exchanges that deviate override ``records``,
    ``extract_pair``, ``is_tradable`` or ``check_envelope``.
    """

    name: str = ""
    display_name: str = ""
    default_url: str = ""
    default_convention: SymbolConvention = SymbolConvention()

    records_path: tuple[str, ...] = ()
    base_field: str = "base"
    quote_field: str = "quote"
    status_field: str = "status"
    tradable_values: frozenset[Any] = frozenset()

    def __init__(
        self,
        *,
        url: str | None = None,
        convention: SymbolConvention | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        **options: Any,
    ):
        """Initialize adapter.

        Args:
            url: Catalog endpoint, defaults to the exchange's public endpoint
            convention: Symbol convention, defaults to the exchange's own
            timeout: Total request timeout in seconds
            **options: Field map overrides (base_field, quote_field,
                status_field, tradable_values)
        """
        unknown = set(options) - FIELD_OPTIONS
        if unknown:
            raise ValueError(f"Unknown {self.name} adapter options: {', '.join(sorted(unknown))}")

        self.url = url or self.default_url
        self.convention = convention or self.default_convention
        self.timeout = timeout
        for key, value in options.items():
            if key == "tradable_values":
                value = frozenset(value)
            setattr(self, key, value)
        self.session: aiohttp.ClientSession | None = None

    async def _ensure_session(self) -> aiohttp.ClientSession:
        if self.session is None:
            self.session = create_session(self.timeout)
        return self.session

    async def fetch(self) -> Iterator[ExchangeInstrument]:
        """Fetch the catalog and return its instruments.

        Envelope and shape errors surface here; per-record parsing is lazy.
        """
        session = await self._ensure_session()
        payload = await fetch_json(session, self.url, exchange=self.name, catalog=EXCHANGE_CATALOG)
        return self.parse(payload)

    def parse(self, payload: Any) -> Iterator[ExchangeInstrument]:
        """Extract instruments from a decoded response body."""
        self.check_envelope(payload)
        return self._iter_instruments(self.records(payload))

    def check_envelope(self, payload: Any) -> None:
        """Reject API-level error responses.

        Default implementation accepts everything.
        """

    def records(self, payload: Any) -> Iterable[Any]:
        """Return the raw instrument records inside the response envelope."""
        node = payload
        for key in self.records_path:
            if not isinstance(node, dict) or key not in node:
                raise self._malformed(f"missing '{key}' in response")
            node = node[key]

        if not isinstance(node, list):
            raise self._malformed(f"expected a list of instruments, got {type(node).__name__}")
        return node

    def extract_pair(self, record: Any) -> tuple[str, str] | None:
        """Return (base, quote) of a record or None if it has no usable pair."""
        if not isinstance(record, dict):
            return None
        base = record.get(self.base_field)
        quote = record.get(self.quote_field)
        if not isinstance(base, str) or not isinstance(quote, str):
            return None
        return base, quote

    def is_tradable(self, record: Any) -> bool:
        # Only str and bool statuses count; 1 must not pass for True.
        value = record.get(self.status_field)
        return isinstance(value, (str, bool)) and value in self.tradable_values

    def _iter_instruments(self, records: Iterable[Any]) -> Iterator[ExchangeInstrument]:
        for record in records:
            pair = self.extract_pair(record)
            if pair is None:
                logger.debug("%s: skipping record without pair: %r", self.name, record)
                continue
            base, quote = (part.strip().upper() for part in pair)
            if not base or not quote:
                continue
            yield ExchangeInstrument(base, quote, self.is_tradable(record))

    def _malformed(self, detail: str) -> MalformedResponse:
        return MalformedResponse(detail, exchange=self.name, catalog=EXCHANGE_CATALOG, url=self.url)

    async def close(self) -> None:
        """Close connections."""
        if self.session:
            await self.session.close()
            self.session = None

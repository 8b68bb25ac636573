"""Protocol definition for exchange catalog adapters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Protocol

from .normalization import SymbolConvention


@dataclass(frozen=True, slots=True)
class ExchangeInstrument:
    """One instrument reported by an exchange.

    Base and quote are upper-case regardless of how the exchange spells them.
    """

    base: str
    quote: str
    tradable: bool


class CatalogAdapter(Protocol):
    """Protocol for fetching an exchange's instrument catalog."""

    name: str
    display_name: str
    url: str
    convention: SymbolConvention

    async def fetch(self) -> Iterator[ExchangeInstrument]:
        """Fetch the instrument catalog.

        Performs exactly one HTTP request; results are a point-in-time
        snapshot and are never cached.

        Returns:
            Iterator over the instruments parsed from the response

        Raises:
            SourceUnreachable: transport failure or timeout
            MalformedResponse: response body has an unexpected shape
        """
        ...

    def parse(self, payload: Any) -> Iterator[ExchangeInstrument]:
        """Extract instruments from an already decoded response body."""
        ...

    async def close(self) -> None:
        """Close the HTTP session."""
        ...

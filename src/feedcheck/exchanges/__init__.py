"""Exchange catalog adapters and symbol conventions."""

from .protocol import CatalogAdapter, ExchangeInstrument
from .normalization import SymbolConvention, build_symbol_set, split_pair, to_exchange_symbol
from .factory import create_catalog_adapter, EXCHANGE_ADAPTERS
from .base import BaseCatalogAdapter

__all__ = [
    "CatalogAdapter",
    "ExchangeInstrument",
    "SymbolConvention",
    "build_symbol_set",
    "split_pair",
    "to_exchange_symbol",
    "create_catalog_adapter",
    "EXCHANGE_ADAPTERS",
    "BaseCatalogAdapter",
]

"""feedcheck: exchange feed coverage checker."""

from .settings import Settings
from .exchanges import SymbolConvention, create_catalog_adapter, to_exchange_symbol
from .matcher import MatchResult, match_pairs

__all__ = [
    "Settings",
    "SymbolConvention",
    "create_catalog_adapter",
    "to_exchange_symbol",
    "MatchResult",
    "match_pairs",
]

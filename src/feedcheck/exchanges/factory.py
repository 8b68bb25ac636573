"""Factory for creating exchange catalog adapters."""

from __future__ import annotations

from typing import Any, Type

from ..errors import UnknownExchange
from .base import DEFAULT_TIMEOUT, BaseCatalogAdapter
from .binance import BinanceAdapter, BinanceUSAdapter
from .bitfinex import BitfinexAdapter
from .bitrue import BitrueAdapter
from .bitstamp import BitstampAdapter
from .bybit import BybitAdapter
from .coinbase import CoinbaseAdapter
from .gateio import GateIOAdapter
from .kraken import KrakenAdapter
from .kucoin import KuCoinAdapter
from .mexc import MEXCAdapter
from .normalization import SymbolConvention
from .okx import OKXAdapter


EXCHANGE_ADAPTERS: dict[str, Type[BaseCatalogAdapter]] = {
    "binanceus": BinanceUSAdapter,
    "bitfinex": BitfinexAdapter,
    "bitrue": BitrueAdapter,
    "bybit": BybitAdapter,
    "coinbase": CoinbaseAdapter,
    "gateio": GateIOAdapter,
    "kucoin": KuCoinAdapter,
    "okx": OKXAdapter,
    "binance": BinanceAdapter,
    "bitstamp": BitstampAdapter,
    "kraken": KrakenAdapter,
    "mexc": MEXCAdapter,
}


def create_catalog_adapter(
    exchange: str,
    *,
    url: str | None = None,
    separator: str | None = None,
    casing: str | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    **options: Any,
) -> BaseCatalogAdapter:
    """Create a catalog adapter instance.

    Args:
        exchange: Exchange name (gateio, okx, coinbase, ...)
        url: Endpoint override
        separator: Symbol separator override
        casing: Symbol casing override ('upper', 'lower', 'preserve')
        timeout: Total request timeout in seconds
        **options: Adapter field map overrides

    Returns:
        Configured adapter

    Raises:
        UnknownExchange: If exchange is not supported
        ValueError: If the convention or options are invalid
    """
    exchange_lower = exchange.lower()

    if exchange_lower not in EXCHANGE_ADAPTERS:
        supported = ", ".join(EXCHANGE_ADAPTERS.keys())
        raise UnknownExchange(
            f"Unsupported exchange: {exchange}. Supported exchanges: {supported}"
        )

    adapter_class = EXCHANGE_ADAPTERS[exchange_lower]

    convention = None
    if separator is not None or casing is not None:
        default = adapter_class.default_convention
        convention = SymbolConvention(
            separator=default.separator if separator is None else separator,
            casing=casing or default.casing,
        )

    return adapter_class(url=url, convention=convention, timeout=timeout, **options)

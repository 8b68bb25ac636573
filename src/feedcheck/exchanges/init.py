"""Catalog adapter initialization from settings."""

from __future__ import annotations

import logging
from typing import Dict, Iterable

from ..errors import UnknownExchange
from ..settings import ExchangeSettings, Settings
from .base import BaseCatalogAdapter
from .factory import EXCHANGE_ADAPTERS, create_catalog_adapter

logger = logging.getLogger(__name__)


def create_adapters_from_settings(
    settings: Settings,
    only: Iterable[str] | None = None,
) -> Dict[str, BaseCatalogAdapter]:
    """Create catalog adapters for every enabled exchange.

    Exchanges missing from ``settings.exchanges`` run with adapter defaults.
    When ``only`` is given, exactly those exchanges are created (in that
    order) even if disabled in configuration.

    Raises:
        UnknownExchange: a configured or requested exchange has no adapter
    """
    for name in settings.exchanges:
        if name.lower() not in EXCHANGE_ADAPTERS:
            raise UnknownExchange(f"Unsupported exchange in configuration: {name}")
    configured = {name.lower(): cfg for name, cfg in settings.exchanges.items()}

    if only:
        names = [name.lower() for name in only]
    else:
        names = list(EXCHANGE_ADAPTERS)

    adapters: Dict[str, BaseCatalogAdapter] = {}
    for name in names:
        exchange_config = configured.get(name, ExchangeSettings())
        if not only and not exchange_config.enabled:
            logger.debug("Exchange %s is disabled, skipping", name)
            continue

        adapters[name] = create_catalog_adapter(
            name,
            url=exchange_config.url,
            separator=exchange_config.separator,
            casing=exchange_config.casing,
            timeout=settings.timeout,
            **exchange_config.options,
        )
        logger.debug("Initialized catalog adapter for %s", name)

    return adapters

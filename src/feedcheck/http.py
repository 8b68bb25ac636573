"""Single-shot JSON fetch shared by the feed loader and exchange adapters."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import aiohttp

from .errors import MalformedResponse, SourceUnreachable

logger = logging.getLogger(__name__)

USER_AGENT = "feedcheck/1.0"


def create_session(timeout: float) -> aiohttp.ClientSession:
    """Create a session whose requests are bounded by ``timeout`` seconds."""
    return aiohttp.ClientSession(
        timeout=aiohttp.ClientTimeout(total=timeout),
        headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
    )


async def fetch_json(
    session: aiohttp.ClientSession,
    url: str,
    *,
    exchange: str | None = None,
    catalog: str | None = None,
) -> Any:
    """GET ``url`` and decode its JSON body.

    Raises:
        SourceUnreachable: transport error, timeout or non-200 status
        MalformedResponse: body is not valid UTF-8 JSON
    """
    context = {"exchange": exchange, "catalog": catalog, "url": url}
    logger.debug("GET %s", url)

    try:
        async with session.get(url) as resp:
            if resp.status != 200:
                raise SourceUnreachable(f"HTTP {resp.status}", **context)
            # Some sources (raw GitHub content) serve JSON as text/plain.
            return await resp.json(content_type=None)
    except (json.JSONDecodeError, aiohttp.ContentTypeError) as exc:
        raise MalformedResponse(f"invalid JSON: {exc}", **context) from exc
    except UnicodeDecodeError as exc:
        raise MalformedResponse(f"undecodable body: {exc}", **context) from exc
    except asyncio.TimeoutError as exc:
        raise SourceUnreachable("request timed out", **context) from exc
    except aiohttp.ClientError as exc:
        raise SourceUnreachable(str(exc) or type(exc).__name__, **context) from exc

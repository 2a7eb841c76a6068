# preload_hints/fetcher.py
"""
Fetcher module: retrieves a rendered page over HTTP with timeout and retry/backoff,
so the CLI can process live pages as well as saved files.
"""
from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Sequence

from aiohttp import ClientError, ClientSession, ClientTimeout

from preload_hints.config import OptimizeConfig
from preload_hints.exceptions import FetchError
from preload_hints.logger import logger

RETRY_STATUS: Sequence[int] = (500, 502, 503, 504)


@dataclass(slots=True)
class PageData:
    """Holds the URL and HTML of a fetched page."""

    url: str
    content: str


async def fetch_page(
    url: str,
    config: OptimizeConfig,
    retry_status: Sequence[int] = RETRY_STATUS,
) -> PageData:
    """
    GET *url* and return its HTML.

    Retries on *retry_status* and client errors with exponential backoff up to
    ``config.retry_times``; raises FetchError on 404, timeouts, non-HTML
    responses or when retries are exhausted.
    """
    timeout = ClientTimeout(total=config.timeout)
    headers = {"User-Agent": config.user_agent}
    attempts = 0
    async with ClientSession(timeout=timeout, headers=headers) as session:
        while True:
            try:
                async with session.get(url, raise_for_status=False) as resp:
                    if resp.status == 404:
                        raise FetchError(url, "404 Not Found")
                    if resp.status in retry_status:
                        raise ClientError(f"Retryable status {resp.status}")
                    ctype = resp.headers.get("Content-Type", "").lower()
                    if "html" not in ctype:
                        raise FetchError(url, f"unexpected content type {ctype or 'unknown'}")
                    text = await resp.text()
                    logger.debug("Fetched %s (%d bytes)", url, len(text))
                    return PageData(url, text)
            except asyncio.TimeoutError as exc:
                # no retry on timeout
                raise FetchError(url, f"timed out after {config.timeout}s") from exc
            except ClientError as exc:
                attempts += 1
                if attempts > config.retry_times:
                    raise FetchError(url, str(exc)) from exc
                delay = min(2 ** (attempts - 1), 60)
                logger.warning("Fetching %s failed (%s), retry %d in %ss", url, exc, attempts, delay)
                await asyncio.sleep(delay)


__all__ = ["PageData", "fetch_page"]

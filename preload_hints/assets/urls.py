"""
URL classification and site host resolution.
"""
from __future__ import annotations

from typing import Optional
from urllib.parse import urlsplit

from preload_hints.assets.models import AssetDescriptor, SourceKind
from preload_hints.exceptions import SiteHostError
from preload_hints.logger import logger


def classify(raw_url: str, source: SourceKind) -> Optional[AssetDescriptor]:
    """
    Split *raw_url* into scheme/host/path/query.

    Protocol-relative and path-only URLs are accepted; ``host`` is ``None`` for
    the latter. Unparseable URLs and URLs with neither host nor path give
    ``None`` so callers can skip them.
    """
    try:
        parts = urlsplit(raw_url.strip())
        host = parts.hostname
    except ValueError as exc:
        logger.debug("Skipping malformed URL %r: %s", raw_url, exc)
        return None
    if not host and not parts.path:
        logger.debug("Skipping URL without host or path: %r", raw_url)
        return None
    return AssetDescriptor(
        path=parts.path,
        scheme=parts.scheme or None,
        host=host or None,
        query=parts.query or None,
        source=source,
    )


def is_external(host: str, site_host: str) -> bool:
    """True unless *host* contains *site_host* anywhere (covers www. and subdomains)."""
    return site_host not in host


def resolve_site_host(board_url: Optional[str], request_host: Optional[str] = None) -> str:
    """
    Return the site hostname from the board URL or, failing that, the
    request Host header. Raises SiteHostError when neither gives a host.
    """
    candidate = board_url if board_url else None
    if candidate is None and request_host:
        candidate = request_host.strip()
        # Host header is a bare network location
        if "//" not in candidate:
            candidate = f"//{candidate}"
    if not candidate:
        logger.error("Site host is not configured and no request host was given")
        raise SiteHostError()
    try:
        host = urlsplit(candidate).hostname
    except ValueError as exc:
        logger.error("Could not parse site host from %r: %s", candidate, exc)
        raise SiteHostError() from exc
    if not host:
        logger.error("No hostname in %r", candidate)
        raise SiteHostError()
    return host


__all__ = ["classify", "is_external", "resolve_site_host"]

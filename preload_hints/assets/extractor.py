"""
Asset extraction for one named source at a time.

Every pass walks its elements in the order given and emits a deduplicated
list (or, for script/link, a host-keyed mapping) of classified assets.
"""
from __future__ import annotations

import re
from typing import Dict, Iterable, List, Optional, Sequence

from preload_hints.assets.filters import matches_any
from preload_hints.assets.models import AssetDescriptor, HostDescriptor, SourceKind
from preload_hints.assets.urls import classify, is_external
from preload_hints.logger import logger
from preload_hints.parser.dom import Node

# First image referenced by a CSS url(...) function
_BG_IMAGE_RE = re.compile(
    r"""url\(\s*['"]?([^'"()]*?\.(?:jpe?g|png|gif|webp))\s*['"]?\s*\)""",
    re.IGNORECASE,
)

# Sources whose nodes are a mix of <img> and styled elements
_MIXED_SOURCES = (SourceKind.DATA_PRELOAD, SourceKind.PRIORITY)

_HOST_ATTRIBUTES = {
    SourceKind.SCRIPT: "src",
    SourceKind.LINK: "href",
}


def background_image_url(style: str) -> Optional[str]:
    """Return the first image URL found in a ``style`` attribute, if any."""
    match = _BG_IMAGE_RE.search(style)
    return match.group(1) if match else None


def _raw_url(node: Node, source: SourceKind) -> Optional[str]:
    if source is SourceKind.IMG or (source in _MIXED_SOURCES and node.is_image):
        return node.get("src")
    if source is SourceKind.BG_STYLE or (source in _MIXED_SOURCES and node.has_style):
        return background_image_url(node.get("style", ""))
    if source is SourceKind.IFRAME:
        return node.get("src")
    return None


def extract_assets(
    elements: Iterable[Node],
    source: SourceKind,
    site_host: str,
    disallowed: Sequence[str] = (),
) -> List[AssetDescriptor]:
    """
    Extract image-like assets from *elements* for the given *source*.

    iframes are kept only when their host is external to *site_host*; the
    *disallowed* patterns are matched against the raw URL.
    """
    if source in _HOST_ATTRIBUTES:
        raise ValueError(f"{source.value} assets are host-keyed, use extract_hosts()")

    assets: List[AssetDescriptor] = []
    seen: set[AssetDescriptor] = set()
    for node in elements:
        raw = _raw_url(node, source)
        if raw is None:
            continue
        if matches_any(raw, disallowed):
            logger.debug("Disallowed %s asset skipped: %s", source.value, raw)
            continue
        asset = classify(raw, source)
        if asset is None:
            continue
        if source is SourceKind.IFRAME and not (asset.host and is_external(asset.host, site_host)):
            continue
        if asset not in seen:
            seen.add(asset)
            assets.append(asset)

    logger.debug("Extracted %d %s assets", len(assets), source.value)
    return assets


def extract_hosts(
    elements: Iterable[Node],
    source: SourceKind,
    site_host: str,
) -> Dict[str, HostDescriptor]:
    """Collect external hosts from script/link elements; the first asset per host wins."""
    try:
        attribute = _HOST_ATTRIBUTES[source]
    except KeyError:
        raise ValueError(f"{source.value} is not a host-keyed source") from None

    hosts: Dict[str, HostDescriptor] = {}
    for node in elements:
        raw = node.get(attribute)
        if raw is None:
            continue
        asset = classify(raw, source)
        if asset is None or not asset.host:
            continue
        if is_external(asset.host, site_host) and asset.host not in hosts:
            hosts[asset.host] = HostDescriptor(host=asset.host, source=source)

    logger.debug("Extracted %d %s hosts", len(hosts), source.value)
    return hosts


__all__ = ["background_image_url", "extract_assets", "extract_hosts"]

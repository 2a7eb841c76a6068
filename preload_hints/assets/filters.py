"""
Substring blocklists for asset URLs.
"""
from __future__ import annotations

from typing import Final, Iterable, List, Sequence

from preload_hints.assets.models import AssetDescriptor

# Checked against raw URLs during extraction; hosts are still gathered broadly
DISALLOWED_INITIAL: Final[tuple[str, ...]] = (
    "base64",
    "blank.gif",
)

# Checked against parsed paths once the preload list is merged
DISALLOWED_FINAL: Final[tuple[str, ...]] = (
    "avatar",
    "/thumbnail/",
    "thumbnail_url",
    "data/attachments",
    "productIcons",
)


def matches_any(haystack: str, patterns: Sequence[str]) -> bool:
    """Case-sensitive substring test; stops at the first matching pattern."""
    for pattern in patterns:
        if pattern in haystack:
            return True
    return False


def remove_disallowed(assets: Iterable[AssetDescriptor], patterns: Sequence[str]) -> List[AssetDescriptor]:
    """Drop assets whose path (never host) matches one of *patterns*."""
    return [asset for asset in assets if not matches_any(asset.path, patterns)]


__all__ = ["DISALLOWED_FINAL", "DISALLOWED_INITIAL", "matches_any", "remove_disallowed"]

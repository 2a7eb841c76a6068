# File: preload_hints/utils.py
"""preload_hints.utils: order-preserving merge helpers for candidate sets."""

from __future__ import annotations

from typing import Dict, Hashable, Iterable, List, Mapping, Sequence, TypeVar

from preload_hints.assets.models import AssetDescriptor, HostDescriptor
from preload_hints.assets.urls import is_external
from preload_hints.logger import logger

__all__: Sequence[str] = (
    "remove_duplicates",
    "merge_unique",
    "hosts_from_assets",
    "merge_hosts",
)

T = TypeVar("T", bound=Hashable)


def remove_duplicates(items: Iterable[T]) -> List[T]:
    """Удаляет дубликаты, сохраняя порядок и первое вхождение."""
    items = list(items)
    unique = list(dict.fromkeys(items))
    removed = len(items) - len(unique)
    if removed:
        logger.debug("Removed %d duplicate entries", removed)
    return unique


def merge_unique(*groups: Iterable[T]) -> List[T]:
    """Concatenate *groups* in order and drop later duplicates."""
    return remove_duplicates(item for group in groups for item in group)


def hosts_from_assets(assets: Iterable[AssetDescriptor], site_host: str) -> Dict[str, HostDescriptor]:
    """Key external assets by host; the first asset seen for a host wins."""
    hosts: Dict[str, HostDescriptor] = {}
    for asset in assets:
        if asset.host and is_external(asset.host, site_host) and asset.host not in hosts:
            hosts[asset.host] = HostDescriptor(host=asset.host, source=asset.source)
    return hosts


def merge_hosts(*groups: Mapping[str, HostDescriptor]) -> List[HostDescriptor]:
    """Fold host mappings in order, first-seen wins on collision."""
    merged: Dict[str, HostDescriptor] = {}
    for group in groups:
        for host, descriptor in group.items():
            merged.setdefault(host, descriptor)
    return list(merged.values())

"""preload_hints.injector: splice <link> hint tags into rendered markup.

Each tag is inserted with a plain replace at a literal anchor, once per item.
Before ``</head>`` this keeps list order; after ``</title>`` the last item
ends up closest to the anchor. Missing anchors leave the markup untouched.
Attribute values are HTML-escaped; ordinary URLs pass through unchanged.
"""
from __future__ import annotations

from html import escape
from typing import Iterable

from preload_hints.assets.models import AssetDescriptor, HostDescriptor

HEAD_CLOSE = "</head>"
TITLE_CLOSE = "</title>"


def preload_tag(asset: AssetDescriptor) -> str:
    return f'<link rel="preload" data-from="{escape(asset.source.value)}" as="image" href="{escape(asset.href)}">'


def preconnect_tag(host: HostDescriptor) -> str:
    return f'<link rel="preconnect" data-from="{escape(host.source.value)}" href="{escape(host.host)}">'


def inject_preload(html: str, assets: Iterable[AssetDescriptor]) -> str:
    for asset in assets:
        html = html.replace(HEAD_CLOSE, preload_tag(asset) + HEAD_CLOSE)
    return html


def inject_preconnect(html: str, hosts: Iterable[HostDescriptor]) -> str:
    for host in hosts:
        html = html.replace(TITLE_CLOSE, TITLE_CLOSE + preconnect_tag(host))
    return html


__all__ = ["inject_preconnect", "inject_preload", "preconnect_tag", "preload_tag"]

"""
Data models for discovered assets and preconnect hosts.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class SourceKind(str, Enum):
    """Where in the document an asset was discovered."""

    IMG = "img"
    BG_STYLE = "bg-style"
    IFRAME = "iframe"
    SCRIPT = "script"
    LINK = "link"
    DATA_PRELOAD = "data-preload"
    PRIORITY = "priority"


@dataclass(frozen=True, slots=True)
class AssetDescriptor:
    """Parsed asset URL; equality ignores the discovery source."""

    path: str
    scheme: Optional[str] = None
    host: Optional[str] = None
    query: Optional[str] = None
    source: SourceKind = field(default=SourceKind.IMG, compare=False)

    @property
    def href(self) -> str:
        """Protocol-relative reference used in the preload tag."""
        if self.host:
            return f"//{self.host}{self.path}"
        return self.path

    def to_dict(self) -> dict[str, Optional[str]]:
        return {
            "scheme": self.scheme,
            "host": self.host,
            "path": self.path,
            "query": self.query,
            "source": self.source.value,
        }


@dataclass(frozen=True, slots=True)
class HostDescriptor:
    """External host to preconnect to, with the source that revealed it."""

    host: str
    source: SourceKind

    def to_dict(self) -> dict[str, str]:
        return {"host": self.host, "source": self.source.value}

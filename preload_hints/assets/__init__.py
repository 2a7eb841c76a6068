"""preload_hints.assets: asset descriptors, URL classification, filtering and extraction."""

from preload_hints.assets.models import AssetDescriptor, HostDescriptor, SourceKind

__all__ = ["AssetDescriptor", "HostDescriptor", "SourceKind"]

"""preload_hints.parser: typed document tree and element selection."""

from preload_hints.parser.dom import Node, parse_document

__all__ = ["Node", "parse_document"]

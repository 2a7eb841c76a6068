"""Typed document tree for preload_hints.

BeautifulSoup does the actual parsing; this module converts its tree into a
small :class:`Node` abstraction exposing only what the asset pipeline needs:

* kind — lower-case tag name (``"img"``, ``"div"``, ...).
* attributes — plain ``str -> str`` mapping (``class`` is *not* split).
* children — element children in document order (text nodes are dropped).

Capability checks (:pyattr:`Node.is_image`, :pyattr:`Node.has_style`) replace
string comparisons on node names throughout the pipeline.
"""
from __future__ import annotations

import warnings
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning
from bs4.element import Tag

__all__: Sequence[str] = ("Node", "parse_document")

ROOT_KIND = "#document"


@dataclass(slots=True, eq=False)
class Node:
    """One element of a parsed document."""

    kind: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)

    @property
    def is_image(self) -> bool:
        return self.kind == "img"

    @property
    def has_style(self) -> bool:
        return "style" in self.attributes

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes

    def get(self, name: str, default: str | None = None) -> str | None:
        return self.attributes.get(name, default)

    # Traversal -------------------------------------------------------------
    def iter(self) -> Iterator[Node]:
        """Yield every descendant element in document order (self excluded)."""
        stack = list(reversed(self.children))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def find_all(self, kind: str) -> list[Node]:
        return [n for n in self.iter() if n.kind == kind]

    def find_with_attribute(self, name: str) -> list[Node]:
        return [n for n in self.iter() if name in n.attributes]


def _attr_value(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(str(v) for v in value)
    return str(value)


def _element(tag: Tag) -> Node:
    return Node(
        kind=(tag.name or "").lower(),
        attributes={k.lower(): _attr_value(v) for k, v in tag.attrs.items()},
    )


def _convert(parent: Tag, target: Node) -> None:
    """Copy the element subtree of *parent* under *target* without recursion."""
    stack = [(parent, target)]
    while stack:
        tag, node = stack.pop()
        for child in tag.children:
            if isinstance(child, Tag):
                converted = _element(child)
                node.children.append(converted)
                stack.append((child, converted))


def parse_document(html: str) -> Node:
    """Parse *html* best-effort and return the document root node.

    The parser's own error recovery applies; warnings it emits about the
    markup are suppressed. Nesting depth is not limited by the interpreter's
    recursion limit.
    """
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
        soup = BeautifulSoup(html, "html.parser", multi_valued_attributes=None)

    root = Node(kind=ROOT_KIND)
    _convert(soup, root)
    return root

"""
Element selection for the asset pipeline: flat tag sets, preload-marked
elements and the template priority region.
"""
from __future__ import annotations

from typing import Iterable, List

from preload_hints.parser.dom import Node

PRELOAD_MARKER = "data-preload"


def _is_candidate(node: Node) -> bool:
    return node.is_image or node.has_style


def unwrap(elements: Iterable[Node]) -> List[Node]:
    """
    Keep images and styled elements; replace anything else by its direct
    image/styled children. Grandchildren are never inspected.
    """
    flat: List[Node] = []
    for node in elements:
        if _is_candidate(node):
            flat.append(node)
        else:
            flat.extend(child for child in node.children if _is_candidate(child))
    return flat


def select_tags(document: Node, kind: str) -> List[Node]:
    """All elements of the given tag name, in document order."""
    return document.find_all(kind)


def select_images(document: Node) -> List[Node]:
    return select_tags(document, "img")


def select_styled(document: Node) -> List[Node]:
    return document.find_with_attribute("style")


def select_marked(document: Node) -> List[Node]:
    """Elements carrying the preload marker attribute, unwrapped one level."""
    return unwrap(document.find_with_attribute(PRELOAD_MARKER))


def _is_priority_container(node: Node, container_class: str) -> bool:
    return node.kind == "div" and node.get("class") == container_class


def select_priority_region(document: Node, container_class: str) -> List[Node]:
    """
    Images inside the priority container plus styled elements anywhere.

    Images must sit somewhere below a ``div`` whose ``class`` attribute equals
    *container_class* exactly; styled elements are collected document-wide.
    Both are returned together in document order.
    """
    selected: List[Node] = []
    stack = [(child, False) for child in reversed(document.children)]
    while stack:
        node, in_region = stack.pop()
        if node.has_style or (in_region and node.is_image):
            selected.append(node)
        inner = in_region or _is_priority_container(node, container_class)
        stack.extend((child, inner) for child in reversed(node.children))
    return unwrap(selected)


__all__ = [
    "PRELOAD_MARKER",
    "select_images",
    "select_marked",
    "select_priority_region",
    "select_styled",
    "select_tags",
    "unwrap",
]

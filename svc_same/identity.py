"""Identity comparison between graph elements of the same kind.

Only identifiers take part in the comparison; labels and property payloads
are ignored. Identifier equality is type-exact: ``1``, ``1.0``, ``True`` and
``"1"`` are four different identifiers.
"""
from typing import Any

from .types import ElementKind


def identifiers_equal(left: Any, right: Any) -> bool:
    return type(left) is type(right) and bool(left == right)


def equal_vertices(left: Any, right: Any) -> bool:
    return identifiers_equal(left.identifier(), right.identifier())


def equal_edges(left: Any, right: Any) -> bool:
    return identifiers_equal(
        left.source_identifier(), right.source_identifier()
    ) and identifiers_equal(left.target_identifier(), right.target_identifier())


def cross_kind_equal(left: Any, right: Any) -> bool:
    # Differing kinds, or anything without identity, are decisively not equal.
    return False


def equal_same_kind(kind: ElementKind, left: Any, right: Any) -> bool:
    """Compare two elements that were both classified as ``kind``."""
    if kind is ElementKind.VERTEX:
        return equal_vertices(left, right)
    if kind is ElementKind.EDGE:
        return equal_edges(left, right)
    return cross_kind_equal(left, right)

"""The SAME predicate.

``same_all`` reduces an argument list to a TriState in a fixed order:

1. fewer than two arguments -> UNKNOWN
2. any absent (``None``) argument anywhere in the list -> UNKNOWN
3. arguments not all of one graph-element kind -> FALSE
4. any argument whose identity differs from the first one -> FALSE
5. otherwise -> TRUE

Comparing every argument to the first one relies on identifier equality
being transitive.
"""
from typing import Any, Iterable, Optional

from .classifier import classify, is_absent
from .identity import equal_same_kind
from .types import ElementKind, Reason, SameVerdict, TriState


def evaluate(elements: Optional[Iterable[Any]]) -> SameVerdict:
    """Evaluate SAME and report which rule decided the outcome."""
    items = tuple(elements) if elements is not None else ()

    if len(items) < 2:
        return SameVerdict(TriState.UNKNOWN, Reason.INSUFFICIENT_ARGUMENTS)

    # Absence outranks every mismatch, so scan the whole list first.
    if any(is_absent(item) for item in items):
        return SameVerdict(TriState.UNKNOWN, Reason.ABSENT_ARGUMENT)

    kinds = [classify(item) for item in items]
    first_kind = kinds[0]
    if first_kind is ElementKind.OTHER or any(kind is not first_kind for kind in kinds[1:]):
        return SameVerdict(TriState.FALSE, Reason.KIND_MISMATCH)

    anchor = items[0]
    for item in items[1:]:
        if not equal_same_kind(first_kind, anchor, item):
            return SameVerdict(TriState.FALSE, Reason.IDENTITY_MISMATCH)

    return SameVerdict(TriState.TRUE, Reason.IDENTITY_MATCH)


def same_all(elements: Optional[Iterable[Any]]) -> TriState:
    return evaluate(elements).outcome


def same(left: Any, right: Any) -> TriState:
    return same_all((left, right))

from typing import Any, Protocol, runtime_checkable

from .types import ElementKind


@runtime_checkable
class VertexLike(Protocol):
    def identifier(self) -> Any: ...


@runtime_checkable
class EdgeLike(Protocol):
    def source_identifier(self) -> Any: ...

    def target_identifier(self) -> Any: ...


def is_absent(value: Any) -> bool:
    return value is None


def _exposes(value: Any, *names: str) -> bool:
    # a plain attribute with the right name is not the capability
    return all(callable(getattr(value, name, None)) for name in names)


def classify(value: Any) -> ElementKind:
    """
    Tag a value by the identity capabilities it exposes.
    An object exposing both an endpoint pair and an id is an edge.
    """
    if is_absent(value) or isinstance(value, type):
        # classes expose the methods too, but unbound
        return ElementKind.OTHER
    if isinstance(value, EdgeLike) and _exposes(value, "source_identifier", "target_identifier"):
        return ElementKind.EDGE
    if isinstance(value, VertexLike) and _exposes(value, "identifier"):
        return ElementKind.VERTEX
    return ElementKind.OTHER

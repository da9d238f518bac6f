from .classifier import EdgeLike, VertexLike, classify
from .predicate import evaluate, same, same_all
from .types import (
    Edge,
    ElementKind,
    Identifier,
    Reason,
    SameVerdict,
    TriState,
    Vertex,
)

__version__ = "0.1.0"

__all__ = [
    "Vertex",
    "Edge",
    "Identifier",
    "ElementKind",
    "TriState",
    "Reason",
    "SameVerdict",
    "VertexLike",
    "EdgeLike",
    "classify",
    "evaluate",
    "same",
    "same_all",
]

from typing import Any, Dict, Iterable, List, Tuple

from pydantic import ValidationError

from .exceptions import InvalidElementError
from .types import Edge, Vertex

EDGE_SOURCE_KEYS: Tuple[str, ...] = ("source", "from", "source_id")
EDGE_TARGET_KEYS: Tuple[str, ...] = ("target", "to", "target_id")
VERTEX_ID_KEYS: Tuple[str, ...] = ("id", "node_id")


def _has_any(item: Dict[str, Any], keys: Tuple[str, ...]) -> bool:
    return any(k in item for k in keys)


def normalize_element(raw: Any) -> Any:
    """
    Decode one JSON value into a graph element.
    null stays None (absent); an object with a source and a target is an Edge,
    one with id/node_id is a Vertex. Everything else is returned unchanged.
    """
    if raw is None or not isinstance(raw, dict):
        return raw

    if _has_any(raw, EDGE_SOURCE_KEYS) and _has_any(raw, EDGE_TARGET_KEYS):
        model = Edge
    elif _has_any(raw, VERTEX_ID_KEYS):
        model = Vertex
    else:
        return raw

    try:
        return model.model_validate(raw)
    except ValidationError as e:
        first = e.errors()[0]
        loc = ".".join(str(p) for p in first.get("loc", ()))
        raise InvalidElementError(
            f"invalid {model.__name__.lower()}: {loc}: {first.get('msg')}"
        ) from e


def normalize_elements(raw: Iterable[Any]) -> List[Any]:
    return [normalize_element(item) for item in raw]

from enum import Enum
from typing import Any, List, NamedTuple, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictInt, StrictStr

# Strict so that "1" never becomes 1 and True never becomes 1.
Identifier = Union[StrictInt, StrictStr]


class Vertex(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: Identifier = Field(validation_alias=AliasChoices("id", "node_id"))
    label: Optional[Any] = None
    properties: Any = Field(
        default_factory=dict, validation_alias=AliasChoices("properties", "data")
    )

    def identifier(self) -> Identifier:
        return self.id


class Edge(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    source: Identifier = Field(validation_alias=AliasChoices("source", "from", "source_id"))
    target: Identifier = Field(validation_alias=AliasChoices("target", "to", "target_id"))
    label: Optional[Any] = None
    properties: Any = Field(
        default_factory=dict, validation_alias=AliasChoices("properties", "data")
    )

    def source_identifier(self) -> Identifier:
        return self.source

    def target_identifier(self) -> Identifier:
        return self.target


class ElementKind(Enum):
    VERTEX = "vertex"
    EDGE = "edge"
    OTHER = "other"


class TriState(Enum):
    """Result of a three-valued predicate.

    Every member is truthy, so never branch on a TriState directly; compare
    against a member or convert with ``to_nullable()``.
    """

    TRUE = "true"
    FALSE = "false"
    UNKNOWN = "unknown"

    def to_nullable(self) -> Optional[bool]:
        if self is TriState.UNKNOWN:
            return None
        return self is TriState.TRUE

    @classmethod
    def from_nullable(cls, value: Optional[bool]) -> "TriState":
        if value is None:
            return cls.UNKNOWN
        return cls.TRUE if value else cls.FALSE


class Reason(Enum):
    INSUFFICIENT_ARGUMENTS = "insufficient_arguments"
    ABSENT_ARGUMENT = "absent_argument"
    KIND_MISMATCH = "kind_mismatch"
    IDENTITY_MISMATCH = "identity_mismatch"
    IDENTITY_MATCH = "identity_match"


class SameVerdict(NamedTuple):
    outcome: TriState
    reason: Reason


# --- HTTP payloads ---

class SameRequest(BaseModel):
    elements: List[Any] = Field(default_factory=list)


class SameResponse(BaseModel):
    result: Optional[bool]
    outcome: TriState
    reason: Reason


class BatchSameRequest(BaseModel):
    evaluations: List[SameRequest]


class BatchSameResponse(BaseModel):
    results: List[SameResponse]


class FunctionCallRequest(BaseModel):
    arguments: List[Any] = Field(default_factory=list)


class FunctionCallResponse(BaseModel):
    function: str
    result: Optional[bool]

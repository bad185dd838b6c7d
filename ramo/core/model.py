from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, NewType, Set, Union

JsonValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]

NodeId = NewType("NodeId", str)
ExpansionSet = Set[NodeId]


class ValueKind(str, Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    OBJECT = "object"
    ARRAY = "array"


@dataclass
class DisplayNode:
    id: NodeId
    display_key: str
    value_summary: str
    value_kind: ValueKind
    depth: int
    expandable: bool = False
    expanded: bool = False
    children: List['DisplayNode'] = field(default_factory=list)

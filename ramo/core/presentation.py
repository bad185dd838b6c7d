import json
from typing import Any

from ramo.core.model import JsonValue, NodeId, ValueKind


def classify(value: Any) -> ValueKind:
    if value is None:
        return ValueKind.NULL
    if isinstance(value, list):
        return ValueKind.ARRAY
    if isinstance(value, dict):
        return ValueKind.OBJECT
    # bool subclasses int, keep it first
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    return ValueKind.STRING


def summarize(value: Any) -> str:
    """Text shown next to a key for anything that is not rendered as a count."""
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return json.dumps(value)
    if value is None:
        return "null"
    return json.dumps(value, ensure_ascii=False)


def node_id(path: str, depth: int) -> NodeId:
    return NodeId(f"{path}_{depth}")


def is_container(value: JsonValue) -> bool:
    return isinstance(value, (dict, list))


def has_entries(value: JsonValue) -> bool:
    return is_container(value) and len(value) > 0


def container_placeholder(value: JsonValue) -> str:
    if isinstance(value, list):
        return f"[{len(value)} items]"
    return f"{{{len(value)} properties}}"


def entries(value: JsonValue):
    """Yields (local key, child) pairs in document order."""
    if isinstance(value, list):
        for index, item in enumerate(value):
            yield str(index), item
    else:
        for key, item in value.items():
            yield key, item

"""
Derives the visible rows of a JSON document from an expansion set.

The display tree is rebuilt from scratch on every call. Children are only
materialized for containers whose id is in the expansion set, so collapsed
branches cost nothing no matter how large they are.
"""
from typing import Iterator, List, Optional, Set

from ramo.core.model import DisplayNode, JsonValue, NodeId
from ramo.core.presentation import (
    classify,
    container_placeholder,
    entries,
    has_entries,
    is_container,
    node_id,
    summarize,
)


def materialize(
    value: JsonValue,
    expansion_set: Set[NodeId],
    path: str = "",
    depth: int = 0,
) -> List[DisplayNode]:
    if not is_container(value):
        return [DisplayNode(
            id=node_id(path, depth),
            display_key=path,
            value_summary=summarize(value),
            value_kind=classify(value),
            depth=depth,
        )]

    result = []
    for key, child in entries(value):
        full_path = f"{path}.{key}" if path else key
        nid = node_id(full_path, depth)
        expandable = has_entries(child)
        expanded = expandable and nid in expansion_set

        if is_container(child):
            summary = container_placeholder(child)
        else:
            summary = summarize(child)

        node = DisplayNode(
            id=nid,
            display_key=key,
            value_summary=summary,
            value_kind=classify(child),
            depth=depth,
            expandable=expandable,
            expanded=expanded,
        )
        if expanded:
            node.children = materialize(child, expansion_set, full_path, depth + 1)

        result.append(node)

    return result


def iter_expandable_ids(value: JsonValue, path: str = "", depth: int = 0) -> Iterator[NodeId]:
    """Ids of every non-empty container below `value`, whatever is expanded."""
    if not is_container(value):
        return

    for key, child in entries(value):
        if has_entries(child):
            full_path = f"{path}.{key}" if path else key
            yield node_id(full_path, depth)
            yield from iter_expandable_ids(child, full_path, depth + 1)


def flatten(tree: List[DisplayNode]) -> Iterator[DisplayNode]:
    """Walks materialized rows in the order they are displayed."""
    for node in tree:
        yield node
        yield from flatten(node.children)


def count_nodes(tree: List[DisplayNode]) -> int:
    return sum(1 for _ in flatten(tree))


def find_node(tree: List[DisplayNode], nid: NodeId) -> Optional[DisplayNode]:
    for node in flatten(tree):
        if node.id == nid:
            return node
    return None

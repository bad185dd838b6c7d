import logging
from typing import Callable, List, Optional, Set

from ramo.core.materializer import iter_expandable_ids, materialize
from ramo.core.model import DisplayNode, JsonValue, NodeId

_MISSING = object()


class ExpansionController:
    """
    Owns the set of expanded node ids and rebuilds the display tree after
    every change. Nothing else writes to `expanded_nodes`.
    """

    def __init__(self, on_change: Optional[Callable[[List[DisplayNode]], None]] = None) -> None:
        self.expanded_nodes: Set[NodeId] = set()
        # Advisory only: picks the expand/collapse-all label. A single toggle
        # always resets it, even if the tree ends up fully expanded.
        self.all_expanded: bool = False
        self.document: JsonValue = None
        self.has_document: bool = False
        self.tree: List[DisplayNode] = []
        self.on_change = on_change

    # --- DOCUMENT ---

    def load(self, value: JsonValue) -> List[DisplayNode]:
        """Replaces the document; ids from the previous one are kept as they are."""
        self.document = value
        self.has_document = True
        return self.rebuild()

    def clear(self) -> List[DisplayNode]:
        self.document = None
        self.has_document = False
        return self.rebuild()

    # --- OPERATIONS ---

    def toggle_node(self, nid: NodeId) -> List[DisplayNode]:
        if nid in self.expanded_nodes:
            self.expanded_nodes.discard(nid)
            logging.debug(f"Collapsed node: {nid}")
        else:
            self.expanded_nodes.add(nid)
            logging.debug(f"Expanded node: {nid}")

        self.all_expanded = False
        return self.rebuild()

    def expand_all(self, value=_MISSING) -> List[DisplayNode]:
        if value is _MISSING:
            value = self.document

        self.expanded_nodes.update(iter_expandable_ids(value))
        self.all_expanded = True
        logging.debug(f"Expanded all nodes ({len(self.expanded_nodes)} ids)")
        return self.rebuild()

    def collapse_all(self) -> List[DisplayNode]:
        self.expanded_nodes.clear()
        self.all_expanded = False
        logging.debug("Collapsed all nodes")
        return self.rebuild()

    def expand_collapse_all(self, value=_MISSING) -> List[DisplayNode]:
        if self.all_expanded:
            return self.collapse_all()
        return self.expand_all(value)

    # --- DERIVATION ---

    def rebuild(self) -> List[DisplayNode]:
        if self.has_document:
            self.tree = materialize(self.document, self.expanded_nodes)
        else:
            self.tree = []

        if self.on_change:
            self.on_change(self.tree)
        return self.tree

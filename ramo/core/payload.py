import json
import logging
from typing import Callable, List, Optional

from ramo.core.controller import ExpansionController
from ramo.core.errors import PayloadParseError
from ramo.core.model import DisplayNode, JsonValue, NodeId


def is_empty_payload(text: Optional[str]) -> bool:
    return not text or text.strip() == "" or text == "{}"


def _reject_constant(name: str):
    raise ValueError(f"Unexpected token {name}")


def parse_payload(text: str) -> JsonValue:
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        raise PayloadParseError(str(e)) from e


class PayloadView:
    """
    State behind one JSON field on screen: the raw text, the error message,
    and the expansion controller that produces the rows.
    """

    def __init__(self, on_change: Optional[Callable[[List[DisplayNode]], None]] = None) -> None:
        self.controller = ExpansionController(on_change=on_change)
        self.field_data: Optional[str] = None
        self.error: Optional[str] = None
        self.show_raw_format: bool = False

    # --- INPUT ---

    def set_payload(self, text: Optional[str]) -> List[DisplayNode]:
        self.field_data = text
        self.error = None

        if is_empty_payload(text):
            logging.debug("No payload or empty payload, clearing tree")
            return self.controller.clear()

        try:
            value = parse_payload(text)
        except PayloadParseError as e:
            logging.error(f"JSON parsing error: {e}")
            self.error = f"Invalid JSON: {e}"
            return self.controller.clear()

        tree = self.controller.load(value)
        logging.debug(f"Tree built with {len(tree)} top level rows")
        return tree

    def set_fetch_error(self, message: str) -> List[DisplayNode]:
        self.field_data = None
        self.error = message
        return self.controller.clear()

    # --- EVENTS ---

    def toggle(self, nid: NodeId) -> List[DisplayNode]:
        return self.controller.toggle_node(nid)

    def expand_collapse_all(self) -> List[DisplayNode]:
        return self.controller.expand_collapse_all()

    def toggle_format(self) -> bool:
        self.show_raw_format = not self.show_raw_format
        return self.show_raw_format

    # --- VIEW ---

    @property
    def tree(self) -> List[DisplayNode]:
        return self.controller.tree

    @property
    def has_payload(self) -> bool:
        return len(self.tree) > 0 and not self.error

    @property
    def expand_collapse_label(self) -> str:
        return "Collapse All" if self.controller.all_expanded else "Expand All"

    @property
    def expand_collapse_icon(self) -> str:
        return "collapse_all" if self.controller.all_expanded else "expand_all"

    @property
    def format_toggle_label(self) -> str:
        return "Show Pretty Format" if self.show_raw_format else "Show Raw JSON"

    @property
    def format_toggle_icon(self) -> str:
        return "preview" if self.show_raw_format else "text"

    @property
    def has_copyable_data(self) -> bool:
        return not is_empty_payload(self.field_data)

    @property
    def formatted_raw_json(self) -> str:
        if not self.field_data:
            return ""
        try:
            return json.dumps(parse_payload(self.field_data), indent=2, ensure_ascii=False)
        except PayloadParseError:
            return self.field_data

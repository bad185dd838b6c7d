import logging
from typing import List, Optional

from rich.markup import escape
from rich.syntax import Syntax
from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, VerticalScroll
from textual.widgets import Footer, Header, Label, LoadingIndicator, Static, Tree

from ramo.__version__ import __version__
from ramo.config import Settings
from ramo.core.clipboard import copy_with_fallback, write_system_clipboard
from ramo.core.errors import FieldFetchError
from ramo.core.labels import field_label
from ramo.core.model import DisplayNode, NodeId, ValueKind
from ramo.core.payload import PayloadView
from ramo.sources import FieldRecord, FieldSource

VALUE_STYLES = {
    ValueKind.STRING: "green",
    ValueKind.NUMBER: "cyan",
    ValueKind.BOOLEAN: "magenta",
    ValueKind.NULL: "dim italic",
    ValueKind.OBJECT: "blue",
    ValueKind.ARRAY: "blue",
}


class JsonTree(Tree):
    """Tree whose bulk expand goes through the app instead of the widget."""

    BINDINGS = [
        Binding("shift+space", "app.expand_collapse_all", "Expand/Collapse All", show=False),
    ]


class RamoApp(App):
    TITLE = "Ramo"
    SUB_TITLE = f"v{__version__}"

    DEFAULT_CSS = """
    Screen { layout: vertical; }

    #info-bar {
        height: 3;
        dock: top;
        background: $surface;
        border-bottom: solid $primary;
        align: left middle;
        padding: 0 1;
    }

    .info-label {
        width: auto;
        height: 1;
        padding: 0 2;
        color: $text;
    }

    #tree-container, #raw-container {
        height: 1fr;
        border: none;
        margin: 0 1;
    }
    Tree { padding: 1; background: $surface; }

    #loading-container { height: 100%; align: center middle; }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("j", "cursor_down", "Down", show=False),
        Binding("k", "cursor_up", "Up", show=False),
        Binding("l", "expand_node", "Expand"),
        Binding("h", "collapse_node", "Collapse"),
        Binding("e", "expand_collapse_all", "Expand/Collapse All"),
        Binding("c", "copy", "Copy"),
        Binding("r", "toggle_format", "Raw/Pretty"),
        Binding("f", "refresh", "Refetch"),
    ]

    def __init__(self, settings: Optional[Settings] = None, source: Optional[FieldSource] = None) -> None:
        super().__init__()
        self.settings = settings or Settings()
        self.source = source
        self.record: Optional[FieldRecord] = None
        self.payload = PayloadView(on_change=self.on_rows_changed)
        self._focus_id: Optional[NodeId] = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)

        with Horizontal(id="info-bar"):
            yield Label(f"[b]Field:[/b] [cyan]{escape(self.field_label)}[/]", id="lbl-field", classes="info-label")
            yield Label("[b]Status:[/b] ...", id="lbl-status", classes="info-label")
            yield Label(f"[b]e:[/b] {self.payload.expand_collapse_label}", id="lbl-expand", classes="info-label")
            yield Label(f"[b]r:[/b] {self.payload.format_toggle_label}", id="lbl-format", classes="info-label")

        with Container(id="main-area"):
            with Container(id="loading-container"):
                yield LoadingIndicator()
                yield Label("Loading field...", id="status-label")

            with Container(id="tree-container"):
                yield JsonTree("Root", id="json-tree")

            with VerticalScroll(id="raw-container"):
                yield Static("", id="raw-json")

        yield Footer()

    def on_mount(self) -> None:
        tree = self.query_one("#json-tree", Tree)
        tree.show_root = False
        self.query_one("#tree-container").display = False
        self.query_one("#raw-container").display = False
        self.load_field()

    @property
    def field_label(self) -> str:
        if self.record:
            return field_label(self.record.field_name, self.record.label, self.record.display_value)
        return field_label(self.settings.field_name)

    # --- ACTIONS ---

    def action_cursor_down(self) -> None:
        self.query_one("#json-tree", Tree).action_cursor_down()

    def action_cursor_up(self) -> None:
        self.query_one("#json-tree", Tree).action_cursor_up()

    def action_expand_node(self) -> None:
        row = self._cursor_row()
        if row and row.expandable and not row.expanded:
            self._focus_id = row.id
            self.payload.toggle(row.id)

    def action_collapse_node(self) -> None:
        tree = self.query_one("#json-tree", Tree)
        node = tree.cursor_node
        if node is None or not isinstance(node.data, DisplayNode):
            return

        if node.data.expanded:
            self._focus_id = node.data.id
            self.payload.toggle(node.data.id)
        elif node.parent and isinstance(node.parent.data, DisplayNode):
            self._focus_id = node.parent.data.id
            self.payload.toggle(node.parent.data.id)

    def action_expand_collapse_all(self) -> None:
        self.payload.expand_collapse_all()

    def action_toggle_format(self) -> None:
        raw = self.payload.toggle_format()
        if raw:
            self.query_one("#raw-json", Static).update(
                Syntax(self.payload.formatted_raw_json, "json", word_wrap=True)
            )
        self.show_content()

    def action_refresh(self) -> None:
        self.load_field()

    def action_copy(self) -> None:
        if not self.payload.has_copyable_data:
            self.notify("The selected field is empty.", title="No data to copy", severity="warning")
            return

        text = self.payload.formatted_raw_json
        if copy_with_fallback(text, [write_system_clipboard, self.copy_to_clipboard]):
            self.notify("JSON data copied to clipboard successfully.", title="Copied!")
        else:
            self.notify(
                "Unable to copy data to clipboard. Please manually select and copy the text.",
                title="Copy Failed",
                severity="error",
            )

    # --- TREE EVENTS ---

    # The widget toggles its own node before telling us; the controller is
    # the source of truth, so the widget change is replayed as a toggle and
    # the tree is rebuilt from the result.
    def on_tree_node_expanded(self, event: Tree.NodeExpanded) -> None:
        row = event.node.data
        if isinstance(row, DisplayNode) and not row.expanded:
            self._focus_id = row.id
            self.payload.toggle(row.id)

    def on_tree_node_collapsed(self, event: Tree.NodeCollapsed) -> None:
        row = event.node.data
        if isinstance(row, DisplayNode) and row.expanded:
            self._focus_id = row.id
            self.payload.toggle(row.id)

    # --- LOGIC ---

    def _cursor_row(self) -> Optional[DisplayNode]:
        node = self.query_one("#json-tree", Tree).cursor_node
        if node is not None and isinstance(node.data, DisplayNode):
            return node.data
        return None

    def update_status(self, msg: str) -> None:
        self.query_one("#status-label", Label).update(msg)

    def update_dashboard_ui(self) -> None:
        if self.payload.error:
            status = f"[red]{escape(self.payload.error)}[/]"
        elif self.payload.has_payload:
            status = f"[green]{len(self.payload.tree)} entries[/]"
        else:
            status = "[dim]No data[/]"

        self.query_one("#lbl-field", Label).update(f"[b]Field:[/b] [cyan]{escape(self.field_label)}[/]")
        self.query_one("#lbl-status", Label).update(f"[b]Status:[/b] {status}")
        self.query_one("#lbl-expand", Label).update(f"[b]e:[/b] {self.payload.expand_collapse_label}")
        self.query_one("#lbl-format", Label).update(f"[b]r:[/b] {self.payload.format_toggle_label}")

    def show_content(self) -> None:
        raw = self.payload.show_raw_format
        self.query_one("#loading-container").display = False
        self.query_one("#tree-container").display = not raw
        self.query_one("#raw-container").display = raw
        self.update_dashboard_ui()
        if not raw:
            self.query_one("#json-tree", Tree).focus()

    @work(thread=False, exclusive=True)
    async def load_field(self) -> None:
        field_name = self.settings.field_name
        try:
            if self.source is None:
                raise FieldFetchError(f"No source can read '{self.settings.target}'.")

            self.update_status(f"Loading {field_name or 'document'} from {self.source.name}...")
            self.record = await self.source.fetch(field_name)

        except FieldFetchError as e:
            logging.exception("Error loading record:")
            self.record = None
            self.payload.set_fetch_error(str(e))

        else:
            self.payload.set_payload(self.record.value)

        if self.payload.show_raw_format:
            self.query_one("#raw-json", Static).update(
                Syntax(self.payload.formatted_raw_json, "json", word_wrap=True)
            )
        self.show_content()

    def on_rows_changed(self, rows: List[DisplayNode]) -> None:
        self.render_tree(rows)
        self.update_dashboard_ui()

    def render_tree(self, rows: List[DisplayNode]) -> None:
        tree = self.query_one("#json-tree", Tree)
        focus_id = self._focus_id
        if focus_id is None:
            row = self._cursor_row()
            focus_id = row.id if row else None
        self._focus_id = None

        tree.clear()
        tree.root.expand()
        found = []

        def add_nodes(tree_node, children):
            for row in children:
                label = self.format_label(row)
                if row.expandable:
                    new_node = tree_node.add(label, data=row, expand=row.expanded)
                else:
                    new_node = tree_node.add_leaf(label, data=row)

                if row.id == focus_id:
                    found.append(new_node)

                add_nodes(new_node, row.children)

        add_nodes(tree.root, rows)

        if found:
            self.call_after_refresh(tree.move_cursor, found[0])

    @staticmethod
    def format_label(row: DisplayNode) -> str:
        style = VALUE_STYLES.get(row.value_kind, "")
        value = f"[{style}]{escape(row.value_summary)}[/]"
        if not row.display_key:
            return value
        return f"[b]{escape(row.display_key)}[/b]: {value}"

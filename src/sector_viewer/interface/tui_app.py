"""Textual TUI application for the sector viewer.

Displays the sector map on the left and the selected system's details and
objects on the right. Key presses are translated into viewer commands and
applied to the session; every panel is then refreshed from session state.
"""

from rich.color import Color as RichColor
from rich.console import RenderableType
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widget import Widget
from textual.widgets import Footer, Static

from ..engine import (
    AdvanceSelectionMode,
    ColorTarget,
    Command,
    CycleColor,
    MoveCursor,
    SelectionChange,
    SelectionMode,
    ViewerSession,
)
from .display import object_names, system_summary, system_title
from .renderer import MapRenderer


def palette_hex(index: int) -> str:
    """Convert a 256-color palette index to a #rrggbb string."""
    return RichColor.from_ansi(index).get_truecolor().hex


class MapPanel(Widget):
    """Widget drawing the sector scatter map."""

    def __init__(self, session: ViewerSession, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.session = session
        self.renderer = MapRenderer()
        self.border_title = "Sector"

    def render(self) -> RenderableType:
        size = self.content_size
        return self.renderer.render(self.session, size.width, size.height)


class SystemPanel(Static):
    """Widget showing details of the system under the cursor."""

    def __init__(self, session: ViewerSession, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.session = session

    def update_panel(self) -> None:
        self.border_title = system_title(self.session)
        self.update(system_summary(self.session))


class ObjectsPanel(Static):
    """Widget listing the planets of the system under the cursor."""

    def __init__(self, session: ViewerSession, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.session = session
        self.border_title = "Objects"

    def update_panel(self) -> None:
        style = ""
        if self.session.selection_mode == SelectionMode.OBJECTS:
            style = f"color({self.session.colors.foreground})"
        self.update(Text("\n".join(object_names(self.session)), style=style))


class SectorViewerTUI(App):
    """Sector viewer TUI application."""

    ENABLE_COMMAND_PALETTE = False

    CSS = """
    #map_panel {
        width: 3fr;
        height: 100%;
        border: round white;
    }

    #info_column {
        width: 2fr;
    }

    SystemPanel, ObjectsPanel {
        height: 1fr;
        border: round white;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
        Binding("tab", "advance_mode", "Mode", show=True, priority=True),
        Binding("up", "move('up')", "Up", show=False, priority=True),
        Binding("down", "move('down')", "Down", show=False, priority=True),
        Binding("left", "move('left')", "Left", show=False, priority=True),
        Binding("right", "move('right')", "Right", show=False, priority=True),
        Binding("c", "cycle_color('both', False)", "Color", show=True),
        Binding("C,shift+c", "cycle_color('both', True)", "Color back", show=False),
        Binding("f", "cycle_color('foreground', False)", "Foreground", show=True),
        Binding("F,shift+f", "cycle_color('foreground', True)", "Foreground back", show=False),
        Binding("g", "cycle_color('accent', False)", "Accent", show=True),
        Binding("G,shift+g", "cycle_color('accent', True)", "Accent back", show=False),
    ]

    def __init__(self, session: ViewerSession, *args, **kwargs):
        """Initialize the TUI app.

        Args:
            session: Viewer session to display and drive
        """
        super().__init__(*args, **kwargs)
        self.session = session
        self.title = session.sector.name
        self.map_panel = None
        self.system_panel = None
        self.objects_panel = None

    def compose(self) -> ComposeResult:
        """Create child widgets."""
        with Horizontal():
            self.map_panel = MapPanel(self.session, id="map_panel")
            yield self.map_panel
            with Vertical(id="info_column"):
                self.system_panel = SystemPanel(self.session)
                yield self.system_panel
                self.objects_panel = ObjectsPanel(self.session)
                yield self.objects_panel
        yield Footer()

    def on_mount(self) -> None:
        self.refresh_display()

    def refresh_display(self) -> None:
        """Refresh all panels from session state."""
        if self.map_panel is None or self.system_panel is None or self.objects_panel is None:
            return

        accent = palette_hex(self.session.colors.accent)
        focused = {
            SelectionMode.MAP: self.map_panel,
            SelectionMode.SYSTEM: self.system_panel,
            SelectionMode.OBJECTS: self.objects_panel,
        }[self.session.selection_mode]

        for panel in (self.map_panel, self.system_panel, self.objects_panel):
            panel.styles.border = ("round", accent if panel is focused else "white")

        self.system_panel.update_panel()
        self.objects_panel.update_panel()
        self.map_panel.refresh()

    def apply(self, command: Command) -> None:
        """Apply a command to the session and redraw."""
        self.session.handle(command)
        self.refresh_display()

    def action_advance_mode(self) -> None:
        self.apply(AdvanceSelectionMode())

    def action_move(self, direction: str) -> None:
        self.apply(MoveCursor(SelectionChange(direction)))

    def action_cycle_color(self, target: str, reverse: bool) -> None:
        self.apply(CycleColor(ColorTarget(target), reverse))

"""Character-canvas rendering of the sector scatter map.

This module rasterises the plot-space points produced by a ViewerSession
(starfield, systems, black holes and the cursor) onto a fixed-size grid of
terminal cells. The plot bounds are [0, columns] x [0, rows], so starfield
points that bleed past the sector edge are clipped.
"""

from typing import Iterable, List, Optional, Sequence, Tuple

from rich.text import Text

from ..engine import SelectionCursor, SelectionMode, ViewerSession

STAR_GLYPH = "."
SYSTEM_GLYPH = "*"
BLACK_HOLE_GLYPH = "@"
CURSOR_GLYPH = "█"
OUTLINE_GLYPH = "·"

# Samples per plot unit when tracing outline segments
OUTLINE_RESOLUTION = 8


class Canvas:
    """Fixed-size grid of styled characters over a plot-space window."""

    def __init__(self, width: int, height: int, x_bounds: Tuple[float, float], y_bounds: Tuple[float, float]):
        """Initialize a blank canvas.

        Args:
            width: Number of character columns
            height: Number of character rows
            x_bounds: (min, max) plot x mapped across the width
            y_bounds: (min, max) plot y mapped across the height
        """
        self.width = max(width, 1)
        self.height = max(height, 1)
        self.x_bounds = x_bounds
        self.y_bounds = y_bounds
        self.cells: List[List[Tuple[str, Optional[str]]]] = [
            [(" ", None)] * self.width for _ in range(self.height)
        ]

    def to_cell(self, x: float, y: float) -> Optional[Tuple[int, int]]:
        """Map a plot point to (column, line), or None if it lies outside."""
        x_min, x_max = self.x_bounds
        y_min, y_max = self.y_bounds
        if not (x_min <= x <= x_max and y_min <= y <= y_max):
            return None

        col = int((x - x_min) / (x_max - x_min) * (self.width - 1) + 0.5)
        # Plot y grows upward, canvas lines grow downward
        line = self.height - 1 - int((y - y_min) / (y_max - y_min) * (self.height - 1) + 0.5)
        return col, line

    def plot(self, points: Iterable[Tuple[float, float]], glyph: str, style: Optional[str] = None) -> None:
        """Draw a glyph at every point that falls inside the canvas."""
        for x, y in points:
            cell = self.to_cell(x, y)
            if cell is not None:
                col, line = cell
                self.cells[line][col] = (glyph, style)

    def trace(self, polyline: Sequence[Tuple[float, float]], glyph: str, style: Optional[str] = None) -> None:
        """Draw the segments joining consecutive points of a polyline."""
        for (x0, y0), (x1, y1) in zip(polyline, polyline[1:]):
            length = max(abs(x1 - x0), abs(y1 - y0))
            steps = max(int(length * OUTLINE_RESOLUTION), 1)
            self.plot(
                ((x0 + (x1 - x0) * i / steps, y0 + (y1 - y0) * i / steps) for i in range(steps + 1)),
                glyph,
                style,
            )

    def lines(self) -> List[str]:
        """Return the canvas as plain strings, top line first."""
        return ["".join(ch for ch, _ in row) for row in self.cells]

    def to_text(self) -> Text:
        """Return the canvas as styled rich Text."""
        text = Text()
        for i, row in enumerate(self.cells):
            if i:
                text.append("\n")
            for ch, style in row:
                text.append(ch, style=style)
        return text


class MapRenderer:
    """Renders a session's sector map onto a character canvas."""

    def __init__(self, cursor: SelectionCursor = SelectionCursor.BLOCK):
        """Initialize renderer.

        Args:
            cursor: Shape used to draw the selection
        """
        self.cursor = cursor

    def draw(self, session: ViewerSession, width: int, height: int) -> Canvas:
        """Draw all map layers for a session.

        Layers, bottom to top: starfield, systems, black holes, selection.
        The selection is only drawn while the map has focus.

        Args:
            session: Session to render
            width: Canvas width in characters
            height: Canvas height in characters

        Returns:
            The filled canvas
        """
        sector = session.sector
        canvas = Canvas(width, height, (0.0, float(sector.columns)), (0.0, float(sector.rows)))
        fg = f"color({session.colors.foreground})"

        canvas.plot(session.starfield, STAR_GLYPH, "grey50")
        canvas.plot(session.system_coords(), SYSTEM_GLYPH, f"bold {fg}")
        canvas.plot(session.black_hole_coords(), BLACK_HOLE_GLYPH, "grey35")

        if session.selection_mode == SelectionMode.MAP:
            selection = session.selection(self.cursor)
            if len(selection) > 1:
                canvas.trace(selection, OUTLINE_GLYPH, "white")
            else:
                canvas.plot(selection, CURSOR_GLYPH, "white")

        return canvas

    def render(self, session: ViewerSession, width: int, height: int) -> Text:
        """Render the map as styled text of the given size."""
        return self.draw(session, width, height).to_text()

"""Viewer configuration constants."""

# Coordinate transform
HORIZONTAL_OFFSET = 0.5  # Centers points horizontally within a cell
VERTICAL_OFFSET = 0.25  # Centers points vertically within a glyph cell
STAGGER_OFFSET = 0.5  # Half-row shift applied to odd columns

# Starfield
FIELD_DENSITY = 1.6  # Background points per grid cell
FIELD_BLEED = 1.0  # How far past the grid edge starfield points may fall

# Selection outline
HEX_HALF_HEIGHT = 0.4

# Grid extent (sector exports store columns/rows as 8-bit counts)
MIN_GRID_EXTENT = 1
MAX_GRID_EXTENT = 255

# Colors (256-color palette indices)
PALETTE_SIZE = 256
DEFAULT_FOREGROUND = 11
DEFAULT_ACCENT = 14

# Info panel
TIMESTAMP_FORMAT = "%b {day}, %Y - %I:%M:%S %p"  # {day} is the space-padded day of month

"""Error types raised by the sector model, grid and loader."""


class SectorError(Exception):
    """Base class for all sector viewer errors."""


class MissingSector(SectorError):
    """Raised when a world contains no sector."""

    def __init__(self, message: str = "The data contained no Sector"):
        super().__init__(message)


class OutOfBounds(SectorError):
    """Raised when a hex coordinate lies outside the sector grid."""

    def __init__(self, x: int, y: int, columns: int, rows: int):
        """Initialize bounds error.

        Args:
            x: Requested column (1-based)
            y: Requested row (1-based)
            columns: Grid width
            rows: Grid height
        """
        self.x = x
        self.y = y
        self.columns = columns
        self.rows = rows
        super().__init__(
            f"Hex ({x}, {y}) is outside the sector grid "
            f"(columns 1-{columns}, rows 1-{rows})"
        )


class UnknownId(SectorError):
    """Raised when a relational lookup references an absent identifier."""

    def __init__(self, kind: str, identifier: str):
        """Initialize lookup error.

        Args:
            kind: Entity collection searched ("system", "sector", ...)
            identifier: Identifier that could not be resolved
        """
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"Unknown {kind} id: {identifier!r}")


class SectorFileError(SectorError):
    """Raised when a sector export cannot be read or fails validation."""

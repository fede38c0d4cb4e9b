"""Viewer color scheme."""

from dataclasses import dataclass

from ..utils.constants import DEFAULT_ACCENT, DEFAULT_FOREGROUND, PALETTE_SIZE


@dataclass
class ColorScheme:
    """Pair of 256-color palette indices.

    The foreground colors systems and list highlights; the accent colors the
    border of whichever panel has focus.
    """

    foreground: int = DEFAULT_FOREGROUND
    accent: int = DEFAULT_ACCENT

    def __post_init__(self):
        """Validate palette indices after initialization."""
        for name in ("foreground", "accent"):
            value = getattr(self, name)
            if not (0 <= value < PALETTE_SIZE):
                raise ValueError(f"Invalid {name} color: {value} (must be 0-{PALETTE_SIZE - 1})")

    def cycle_foreground(self, reverse: bool = False) -> None:
        self.foreground = _step(self.foreground, reverse)

    def cycle_accent(self, reverse: bool = False) -> None:
        self.accent = _step(self.accent, reverse)

    def as_tuple(self) -> tuple[int, int]:
        return (self.foreground, self.accent)


def _step(index: int, reverse: bool) -> int:
    return (index + (-1 if reverse else 1)) % PALETTE_SIZE

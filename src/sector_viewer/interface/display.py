"""Info panel formatting for the selected system."""

from datetime import datetime
from typing import List, Optional, Tuple

from ..engine import ViewerSession
from ..utils.constants import TIMESTAMP_FORMAT


def hex_label(cursor: Tuple[int, int]) -> str:
    """Format a 1-based hex as the zero-based XXYY label used by sector maps.

    Examples:
        >>> hex_label((1, 1))
        '0000'
        >>> hex_label((3, 12))
        '0211'
    """
    x, y = cursor
    return f"{x - 1:0>2}{y - 1:0>2}"


def format_timestamp(value: Optional[str]) -> str:
    """Format an RFC 3339 timestamp in local time, or "None" when absent.

    Unparseable values are shown as-is.
    """
    if not value:
        return "None"
    try:
        moment = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return value
    local = moment.astimezone()
    return local.strftime(TIMESTAMP_FORMAT).format(day=f"{local.day:>2}")


def system_title(session: ViewerSession) -> str:
    return f"System [{hex_label(session.cursor)}]"


def system_summary(session: ViewerSession) -> str:
    """Describe the system under the cursor, or "" if the cell is empty."""
    system = session.selected_system()
    if system is None:
        return ""

    hidden = " (hidden)" if system.is_hidden else ""
    kind = " - black hole" if system.category == "blackHole" else ""
    lines = [
        f"{system.name}{hidden}{kind}",
        f"  Coordinates: [{hex_label(session.cursor)}]",
        f"  Created: {format_timestamp(system.created)}",
        f"  Updated: {format_timestamp(system.updated)}",
    ]
    return "\n".join(lines)


def object_names(session: ViewerSession) -> List[str]:
    """Names of the planets orbiting the selected system, sorted."""
    return sorted(p.name for p in session.selected_planets())

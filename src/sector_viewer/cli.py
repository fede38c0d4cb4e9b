"""Sector Viewer - command-line entry point.

Loads a Sectors Without Number export and opens it in the terminal viewer.
"""

import argparse
import logging
import sys

from . import __version__
from .engine import ViewerSession
from .errors import SectorError
from .utils.serialization import load_world

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sector-viewer",
        description="Sector Viewer - terminal map of a Sectors Without Number export",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s -f sector.json                         # View an exported sector
  %(prog)s -f sector.json --debug --log-file v.log  # Write debug logs to v.log

Keys:
  tab             cycle focus: map -> system -> objects
  arrows          move the map cursor
  c / f / g       cycle both / foreground / accent colors (shift reverses)
  q               quit
        """,
    )
    parser.add_argument(
        "-f",
        "--file",
        required=True,
        metavar="FILE",
        help="Load JSON exported from Sectors Without Number",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--log-file",
        metavar="FILE",
        default=None,
        help="Write logs to FILE (the viewer owns the terminal while running)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(debug: bool, log_file: str | None) -> None:
    """Configure root logging.

    Without a log file only warnings reach stderr, so log output does not
    draw over the running viewer.
    """
    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file)
        level = logging.DEBUG if debug else logging.INFO
    else:
        handler = logging.StreamHandler(sys.stderr)
        level = logging.DEBUG if debug else logging.WARNING

    logging.basicConfig(
        level=level,
        format="[%(levelname)s] %(message)s",
        handlers=[handler],
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(args.debug, args.log_file)

    try:
        world = load_world(args.file)
        session = ViewerSession(world)
    except SectorError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    from .interface.tui_app import SectorViewerTUI

    SectorViewerTUI(session).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())

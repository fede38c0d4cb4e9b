"""Allow ``python -m sector_viewer``."""

import sys

from .cli import main

sys.exit(main())

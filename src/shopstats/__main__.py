"""Allow running shopstats with ``python -m shopstats``."""

import sys

from .cli import main

sys.exit(main())

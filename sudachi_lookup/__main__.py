"""Allow running as ``python -m sudachi_lookup``."""

import sys

from sudachi_lookup.cli.main import main

sys.exit(main())

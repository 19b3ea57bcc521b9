"""Allow running as ``python -m citegraph``."""

import sys

from citegraph.cli import main

sys.exit(main())

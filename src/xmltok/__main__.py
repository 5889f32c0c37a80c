"""Allow running as ``python -m xmltok``."""

import sys

from xmltok.cli import main

sys.exit(main())

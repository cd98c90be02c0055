"""Allow running funcbench with ``python -m funcbench``."""

import sys

from funcbench.cli.main import main

sys.exit(main())

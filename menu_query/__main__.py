"""Entry point for ``python -m menu_query``."""

import sys

from menu_query.cli import main

sys.exit(main())

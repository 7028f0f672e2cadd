"""Allow ``python -m metasearch.cli`` execution (runs the search command)."""

import sys

from metasearch.cli.search import main

sys.exit(main())

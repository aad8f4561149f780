"""Entry point for ``python -m pyechelon``."""

import sys

from pyechelon.cli import main

sys.exit(main())

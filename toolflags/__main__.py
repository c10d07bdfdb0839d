"""Allow ``python -m toolflags``."""

import sys

from .cli import main

sys.exit(main())

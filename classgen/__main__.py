"""Allow ``python -m classgen``."""

import sys

from .cli import main

sys.exit(main())

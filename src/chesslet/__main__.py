"""Allow ``python -m chesslet``."""

import sys

from chesslet.app import main

sys.exit(main())

"""Allow running as: python -m duel_referee"""

import sys

from .cli import main

sys.exit(main())

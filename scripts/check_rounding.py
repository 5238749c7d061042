"""Run the cash rounding self-check; exit status 1 when any case fails."""

import os
import sys

# Ensure project root on path when executed directly
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from cashdesk.core.logging import init_logging
from cashdesk.services.rounding_check import main


if __name__ == "__main__":
    init_logging()
    sys.exit(main())

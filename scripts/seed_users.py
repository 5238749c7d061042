"""Create the bootstrap accounts listed in SEED_USERS.

Example:
    SEED_USERS='[{"username": "admin", "password": "...", "role": "admin"}]' \
        python scripts/seed_users.py
"""

import os
import sys

# Ensure project root on path when executed directly
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from cashdesk.db.seed import run_seed


if __name__ == "__main__":
    sys.exit(run_seed())

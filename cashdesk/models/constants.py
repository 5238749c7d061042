"""Domain enumerations shared across models, services and routers."""

ROLES = ["admin", "user"]

# Only cash settlements are snapped to the 0.10 grid
PAYMENT_METHODS = ["cash", "card", "transfer"]
CASH_PAYMENT_METHOD = "cash"

# bcrypt ignores input past this many bytes
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_BYTES = 72

"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PORT = 3001
DEFAULT_POOL_SIZE = 10
DEFAULT_POOL_TIMEOUT = 30.0
POOL_NAME = "hr_admin_pool"

# secrets.token_hex(64) -> 128 hex chars
LOGIN_TOKEN_BYTES = 64

INBOUND_DATE_FORMAT = "%Y-%m-%d"
OUTBOUND_DATE_FORMAT = "%d/%m/%Y"

"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

WAGE_DECIMAL_PLACES = 2
DEFAULT_REPORT_COUNT_STRATEGY = "per_laborer"
DEFAULT_DB_PORT = 3306

# Column widths in schema.sql
MAX_KEY_LENGTH = 64
MAX_NAME_LENGTH = 255

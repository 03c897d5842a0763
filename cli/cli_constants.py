"""
Constants for the Newsletter Signup Service command line interface.
"""

from models.signup_record import (
    COLUMN_CHILDREN_NAMES,
    COLUMN_DATE,
    COLUMN_EMAIL,
    COLUMN_PARENT_NAME,
)

# Exit codes
EXIT_SUCCESS = 0
EXIT_ERROR = 1

# Command groups
COMMAND_GROUP_REPORTS = 'reports'

# Column order used when printing rows
RECENT_COLUMNS = (COLUMN_DATE, COLUMN_PARENT_NAME, COLUMN_EMAIL, COLUMN_CHILDREN_NAMES)

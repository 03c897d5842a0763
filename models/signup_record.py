"""
Signup record model.

A signup record is one persisted row of the signup spreadsheet. Records are
built by the signup workflow after validation and are never mutated.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List

# Column order of the signup spreadsheet
COLUMN_DATE = 'Date'
COLUMN_PARENT_NAME = 'Parent Name'
COLUMN_EMAIL = 'Email'
COLUMN_CHILDREN_NAMES = 'Children Names'
COLUMN_EMAIL_STATUS = 'Email Status'
COLUMN_SIGNUP_SOURCE = 'Signup Source'

SIGNUP_COLUMNS: List[str] = [
    COLUMN_DATE,
    COLUMN_PARENT_NAME,
    COLUMN_EMAIL,
    COLUMN_CHILDREN_NAMES,
    COLUMN_EMAIL_STATUS,
    COLUMN_SIGNUP_SOURCE,
]

# Placeholder stored when no children names were given
CHILDREN_NAMES_SENTINEL = 'N/A'

EMAIL_STATUS_ACTIVE = 'active'
SIGNUP_SOURCE_WEB_FORM = 'web_form'


@dataclass(frozen=True)
class SignupRecord:
    """One newsletter signup, in spreadsheet column order."""

    date: date
    parent_name: str
    parent_email: str
    children_names: str = CHILDREN_NAMES_SENTINEL
    email_status: str = EMAIL_STATUS_ACTIVE
    signup_source: str = SIGNUP_SOURCE_WEB_FORM

    def to_row(self) -> List[str]:
        # Spreadsheet-friendly
        return [
            self.date.isoformat(),
            self.parent_name,
            self.parent_email,
            self.children_names,
            self.email_status,
            self.signup_source,
        ]

    def to_dict(self) -> Dict[str, Any]:
        return dict(zip(SIGNUP_COLUMNS, self.to_row()))

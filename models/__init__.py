"""
Data models package for the Newsletter Signup Service.

The service keeps its data in a single spreadsheet, so the models here are
plain immutable value objects rather than ORM classes.
"""

from .signup_record import (
    CHILDREN_NAMES_SENTINEL,
    SIGNUP_COLUMNS,
    SignupRecord,
)

__all__ = ['CHILDREN_NAMES_SENTINEL', 'SIGNUP_COLUMNS', 'SignupRecord']

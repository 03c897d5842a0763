"""
Service Constants for the Newsletter Signup Service.

This module defines constants, defaults, and enumerations used across the
service layer. Centralizing these values keeps the validation messages, the
email copy, and the report defaults consistent between the workflow, the
notifier, and the report generator. The spreadsheet column layout lives
with the record model in models/signup_record.py.
"""

from typing import Tuple

from models.signup_record import (
    COLUMN_CHILDREN_NAMES,
    COLUMN_DATE,
    COLUMN_EMAIL,
    COLUMN_EMAIL_STATUS,
    COLUMN_PARENT_NAME,
    EMAIL_STATUS_ACTIVE,
)

# ============================================================================
# Service Versioning
# ============================================================================

__version__ = '1.0.0'
__author__ = 'JULDD Media'
__description__ = 'Service layer for the JULDD Media newsletter signup service'

# ============================================================================
# Signup Workflow Constants
# ============================================================================

# Payload keys accepted for children names, in order of precedence
CHILDREN_NAME_KEYS: Tuple[str, ...] = ('childrenNames', 'childName', 'children')

# Basic local@domain.tld check applied to submitted addresses
EMAIL_PATTERN = r'^[^\s@]+@[^\s@]+\.[^\s@]+$'

# Name of the single sheet holding the signup table
DEFAULT_SHEET_NAME = 'Signups'

# ============================================================================
# Messages
# ============================================================================

MESSAGE_MISSING_FIELDS = 'missing required fields'
MESSAGE_INVALID_EMAIL = 'invalid email format'
MESSAGE_SIGNUP_PROCESSED = 'Signup processed successfully'
MESSAGE_NO_NEW_SIGNUPS = 'No new signups'

# ============================================================================
# Email Constants
# ============================================================================

TRANSPORT_RESEND = 'resend'
TRANSPORT_SMTP = 'smtp'
TRANSPORT_LOG = 'log'
EMAIL_TRANSPORTS: Tuple[str, ...] = (TRANSPORT_RESEND, TRANSPORT_SMTP, TRANSPORT_LOG)

RESEND_API_URL = 'https://api.resend.com/emails'
DEFAULT_BRAND_NAME = 'JULDD Media'
DEFAULT_FROM_EMAIL = 'JULDD Media <onboarding@resend.dev>'
DEFAULT_SUPPORT_EMAIL = 'support@julddmedia.com'
DEFAULT_REPORT_RECIPIENT = 'julie@juldd.com'

CONFIRMATION_SUBJECT_TEMPLATE = "\U0001F389 Welcome to {brand} Kids' AI Newsletter!"
DIGEST_SUBJECT_TEMPLATE = '{label} - New Newsletter Signups'
TEST_REPORT_SUBJECT_TEMPLATE = '\U0001F9EA TEST REPORT - {brand} Newsletter Signups'

CHILDREN_NOT_SPECIFIED = 'Not specified (you can update this later)'

# ============================================================================
# Report Constants
# ============================================================================

DEFAULT_REPORT_LIMIT = 5
DEFAULT_REPORT_LABEL = 'Daily Report'
TEST_REPORT_LABEL = 'Test Report'

# Sample rows used by the test report
TEST_REPORT_ROWS = [
    {
        COLUMN_DATE: '2025-11-02',
        COLUMN_PARENT_NAME: 'Test Parent 1',
        COLUMN_EMAIL: 'test1@example.com',
        COLUMN_CHILDREN_NAMES: 'Test Child 1',
        COLUMN_EMAIL_STATUS: EMAIL_STATUS_ACTIVE,
    },
    {
        COLUMN_DATE: '2025-11-02',
        COLUMN_PARENT_NAME: 'Test Parent 2',
        COLUMN_EMAIL: 'test2@example.com',
        COLUMN_CHILDREN_NAMES: 'Test Child 2, Test Child 3',
        COLUMN_EMAIL_STATUS: EMAIL_STATUS_ACTIVE,
    },
]

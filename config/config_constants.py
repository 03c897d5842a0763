"""
Configuration constants for the Newsletter Signup Service.

This module centralizes configuration constants used by the configuration
classes in config/base.py and the environment-specific subclasses, so that
environment names and type hints for environment variables are defined in
one place.
"""

from typing import FrozenSet

#=====================================================================
# Environment Constants
#=====================================================================

# Environment names
ENVIRONMENT_DEVELOPMENT = 'development'
ENVIRONMENT_TESTING = 'testing'
ENVIRONMENT_PRODUCTION = 'production'

# Set of allowed environments
ALLOWED_ENVIRONMENTS: FrozenSet[str] = frozenset([
    ENVIRONMENT_DEVELOPMENT,
    ENVIRONMENT_TESTING,
    ENVIRONMENT_PRODUCTION,
])

# Set of environments requiring validated delivery settings
SECURE_ENVIRONMENTS: FrozenSet[str] = frozenset([
    ENVIRONMENT_PRODUCTION,
])

#=====================================================================
# Environment Variables
#=====================================================================

# Set by the Vercel platform; its filesystem is read-only at runtime
READ_ONLY_PLATFORM_VAR = 'VERCEL'

# Keys read from the environment as plain strings
STRING_ENV_KEYS: FrozenSet[str] = frozenset([
    'SIGNUP_STORE_PATH',
    'SIGNUP_SHEET_NAME',
    'EMAIL_TRANSPORT',
    'RESEND_API_KEY',
    'RESEND_API_URL',
    'FROM_EMAIL',
    'SMTP_SERVER',
    'SMTP_USERNAME',
    'SMTP_PASSWORD',
    'REPORT_RECIPIENT',
    'REPORT_DEFAULT_LABEL',
    'NEWSLETTER_BRAND',
    'SUPPORT_EMAIL',
    'CORS_ORIGINS',
    'LOG_LEVEL',
    'LOG_DIR',
    'SENTRY_DSN',
])

# Keys read from the environment as integers
INT_ENV_KEYS: FrozenSet[str] = frozenset([
    'SMTP_PORT',
    'EMAIL_TIMEOUT',
    'REPORT_LIMIT',
])

# Keys read from the environment as booleans
BOOL_ENV_KEYS: FrozenSet[str] = frozenset([
    'SIGNUP_PERSISTENCE_ENABLED',
    'SMTP_USE_TLS',
    'LOG_TO_FILE',
])

TRUE_VALUES: FrozenSet[str] = frozenset(['true', 'yes', '1', 'on'])
FALSE_VALUES: FrozenSet[str] = frozenset(['false', 'no', '0', 'off'])

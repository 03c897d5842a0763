"""
Production environment configuration for the Newsletter Signup Service.

This module defines the configuration settings for the production
environment: real email delivery, file logging, and error reporting.
"""

import os
from .base import Config
from .config_constants import ENVIRONMENT_PRODUCTION


class ProductionConfig(Config):
    """
    Configuration for production environment.

    Requires delivery credentials for the selected transport (validated in
    ``Config._validate_configuration``).
    """

    DEBUG = False
    TESTING = False
    ENVIRONMENT = ENVIRONMENT_PRODUCTION

    EMAIL_TRANSPORT = 'resend'

    # Persistent logs
    LOG_TO_FILE = True
    LOG_LEVEL = 'INFO'

    # Sentry error reporting
    SENTRY_DSN = os.environ.get('SENTRY_DSN')
    SENTRY_TRACES_SAMPLE_RATE = 0.1

"""
Development environment configuration for the Newsletter Signup Service.
"""

import os
from .base import Config
from .config_constants import ENVIRONMENT_DEVELOPMENT


class DevelopmentConfig(Config):
    """
    Configuration for development environment.

    Emails are written to the log unless a transport is configured, and the
    signup workbook is kept next to the working directory.
    """

    DEBUG = True
    TESTING = False
    ENVIRONMENT = ENVIRONMENT_DEVELOPMENT

    # Development-specific logging
    LOG_LEVEL = 'DEBUG'

    # Log emails instead of sending them until a key is provided
    EMAIL_TRANSPORT = 'resend' if os.environ.get('RESEND_API_KEY') else 'log'

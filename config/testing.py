"""
Testing environment configuration for the Newsletter Signup Service.

This module defines configuration settings for automated tests: no real
email is sent and the signup workbook lives in a temporary directory.
"""

import os
import tempfile
from .base import Config
from .config_constants import ENVIRONMENT_TESTING


class TestingConfig(Config):
    """
    Configuration for testing environment.

    Tests normally override SIGNUP_STORE_PATH with a per-test path and
    inject a fake email transport.
    """

    DEBUG = False
    TESTING = True
    ENVIRONMENT = ENVIRONMENT_TESTING

    SECRET_KEY = 'test-secret-key'

    SIGNUP_STORE_PATH = os.path.join(tempfile.gettempdir(), 'signups-test.xlsx')

    # Never reach a real provider from tests
    EMAIL_TRANSPORT = 'log'
    EMAIL_TIMEOUT = 5

    LOG_LEVEL = 'WARNING'
    LOG_TO_FILE = False
    SENTRY_DSN = None

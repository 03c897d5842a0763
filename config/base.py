"""
Base configuration class for the Newsletter Signup Service.
"""

import logging
import os
from typing import Any

from services.service_constants import (
    DEFAULT_BRAND_NAME,
    DEFAULT_FROM_EMAIL,
    DEFAULT_REPORT_LABEL,
    DEFAULT_REPORT_LIMIT,
    DEFAULT_REPORT_RECIPIENT,
    DEFAULT_SHEET_NAME,
    DEFAULT_SUPPORT_EMAIL,
    EMAIL_TRANSPORTS,
    RESEND_API_URL as DEFAULT_RESEND_API_URL,
    TRANSPORT_RESEND,
    TRANSPORT_SMTP,
)
from .config_constants import (
    BOOL_ENV_KEYS,
    FALSE_VALUES,
    INT_ENV_KEYS,
    READ_ONLY_PLATFORM_VAR,
    SECURE_ENVIRONMENTS,
    STRING_ENV_KEYS,
    TRUE_VALUES,
)

# Set up module logger
logger = logging.getLogger(__name__)


class Config:
    """
    Configuration management class for the application.

    Class attributes hold the defaults. ``init_app`` copies them into the
    Flask config, applies environment variable overrides, resolves the
    persistence flag once, and validates the result.
    """

    ENVIRONMENT = 'development'
    DEBUG = False
    TESTING = False
    VERSION = '1.0.0'

    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev')

    # Signup store
    SIGNUP_STORE_PATH = os.path.join(os.getcwd(), 'JULDD_Media_Signups.xlsx')
    SIGNUP_SHEET_NAME = DEFAULT_SHEET_NAME
    # None means: resolve from the platform at startup
    SIGNUP_PERSISTENCE_ENABLED = None

    # Email delivery
    EMAIL_TRANSPORT = TRANSPORT_RESEND
    RESEND_API_KEY = None
    RESEND_API_URL = DEFAULT_RESEND_API_URL
    FROM_EMAIL = DEFAULT_FROM_EMAIL
    SMTP_SERVER = None
    SMTP_PORT = 587
    SMTP_USERNAME = None
    SMTP_PASSWORD = None
    SMTP_USE_TLS = True
    EMAIL_TIMEOUT = 30  # seconds

    # Newsletter copy
    NEWSLETTER_BRAND = DEFAULT_BRAND_NAME
    SUPPORT_EMAIL = DEFAULT_SUPPORT_EMAIL

    # Digest reports
    REPORT_RECIPIENT = DEFAULT_REPORT_RECIPIENT
    REPORT_LIMIT = DEFAULT_REPORT_LIMIT
    REPORT_DEFAULT_LABEL = DEFAULT_REPORT_LABEL

    # HTTP
    CORS_ORIGINS = '*'

    # Logging and monitoring
    LOG_LEVEL = 'INFO'
    LOG_TO_FILE = False
    LOG_DIR = 'logs'
    SENTRY_DSN = None
    SENTRY_TRACES_SAMPLE_RATE = 0.0

    @classmethod
    def init_app(cls, app) -> None:
        """
        Initialize the application with configuration settings.

        Args:
            app: Flask application instance

        Raises:
            ValueError: If the configuration is invalid for the environment
        """
        app.config.from_object(cls)

        # Load settings from environment variables (highest priority)
        cls._load_from_environment(app)

        # Setup derived values and special cases
        cls._setup_derived_values(app)

        cls._validate_configuration(app)

    @classmethod
    def _load_from_environment(cls, app) -> None:
        """
        Load configuration from environment variables.

        Environment variables take precedence over class defaults. Known keys
        are converted to their expected type; other ``FLASK_`` prefixed
        variables are converted by value.

        Args:
            app: Flask application instance
        """
        for key, value in os.environ.items():
            if key.startswith('FLASK_') and key not in ('FLASK_APP', 'FLASK_ENV', 'FLASK_DEBUG'):
                app.config[key[6:]] = cls._convert_env_value(value)

        for key in STRING_ENV_KEYS:
            if key in os.environ:
                app.config[key] = os.environ[key]

        for key in INT_ENV_KEYS:
            if key in os.environ:
                try:
                    app.config[key] = int(os.environ[key])
                except ValueError:
                    logger.warning(f"Invalid integer for {key}: {os.environ[key]!r}, using default")

        for key in BOOL_ENV_KEYS:
            if key in os.environ:
                value = cls._convert_env_value(os.environ[key])
                if isinstance(value, bool):
                    app.config[key] = value
                else:
                    logger.warning(f"Invalid boolean for {key}: {os.environ[key]!r}, using default")

    @classmethod
    def _setup_derived_values(cls, app) -> None:
        """
        Set up configuration values derived from other settings.

        The persistence flag is resolved here once: unless set explicitly,
        signups are not written on read-only platforms.

        Args:
            app: Flask application instance
        """
        if app.config.get('SIGNUP_PERSISTENCE_ENABLED') is None:
            read_only = bool(os.environ.get(READ_ONLY_PLATFORM_VAR))
            app.config['SIGNUP_PERSISTENCE_ENABLED'] = not read_only
            if read_only:
                logger.info("Read-only platform detected: signup persistence disabled")

        app.config['EMAIL_TRANSPORT'] = str(app.config.get('EMAIL_TRANSPORT') or TRANSPORT_RESEND).lower()
        app.config['LOG_LEVEL'] = str(app.config.get('LOG_LEVEL') or 'INFO').upper()

    @staticmethod
    def _convert_env_value(value: str) -> Any:
        """
        Convert environment variable string to appropriate Python type.

        Args:
            value: String value from environment variable

        Returns:
            Value converted to appropriate type (bool, int, float, str)
        """
        if value.lower() in TRUE_VALUES:
            return True
        elif value.lower() in FALSE_VALUES:
            return False
        elif value.isdigit():
            return int(value)
        elif value.replace('.', '', 1).isdigit() and value.count('.') == 1:
            return float(value)
        return value

    @classmethod
    def _validate_configuration(cls, app) -> None:
        """
        Validate that the configuration is usable.

        Delivery credentials are only required in secure environments, so
        development can run with the log transport and no keys.

        Args:
            app: Flask application instance

        Raises:
            ValueError: If configuration validation fails
        """
        transport = app.config['EMAIL_TRANSPORT']
        if transport not in EMAIL_TRANSPORTS:
            raise ValueError(f"Unsupported EMAIL_TRANSPORT: {transport}")

        limit = app.config.get('REPORT_LIMIT')
        if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
            raise ValueError(f"REPORT_LIMIT must be a positive integer, got {limit!r}")

        if not app.config.get('SIGNUP_STORE_PATH'):
            raise ValueError("SIGNUP_STORE_PATH must be set")

        if app.config.get('ENVIRONMENT') not in SECURE_ENVIRONMENTS:
            return

        if transport == TRANSPORT_RESEND and not app.config.get('RESEND_API_KEY'):
            raise ValueError("Missing required environment variables: RESEND_API_KEY")

        if transport == TRANSPORT_SMTP and not app.config.get('SMTP_SERVER'):
            raise ValueError("Missing required environment variables: SMTP_SERVER")

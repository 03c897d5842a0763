"""
Centralized logging configuration for the Newsletter Signup Service.

This module configures the application's logging: a human-readable console
handler that carries the current request id, an optional size-rotated JSON
log file, and Sentry error reporting when a DSN is configured.
"""

import json
import logging
import logging.handlers
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict

import sentry_sdk
from flask import Flask, g, has_request_context, request
from sentry_sdk.integrations.flask import FlaskIntegration

CONSOLE_FORMAT = '%(asctime)s [%(request_id)s] %(levelname)s: %(message)s'
LOG_FILE_NAME = 'application.log'
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUP_COUNT = 10

# Loggers that receive the application handlers
APPLICATION_LOGGERS = ('services',)

# Marker attribute so handlers installed by a previous app can be replaced
_HANDLER_MARKER = '_signup_service_handler'


class RequestContextFilter(logging.Filter):
    """Attach the current request id to every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        if has_request_context():
            record.request_id = getattr(g, 'request_id', '-')
        else:
            record.request_id = '-'
        return True


class JsonFormatter(logging.Formatter):
    """
    Format log records as single-line JSON documents.

    Request details are included when the record is emitted inside a
    request. Form and JSON bodies are never logged since they carry
    subscriber email addresses.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno,
            "request_id": getattr(record, 'request_id', '-'),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if has_request_context():
            log_data["request"] = {
                "method": request.method,
                "path": request.path,
                "endpoint": request.endpoint,
                "remote_addr": request.remote_addr,
            }

        return json.dumps(log_data, default=str)


def _mark(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_MARKER, True)
    return handler


def _reset_handlers(logger: logging.Logger) -> None:
    # Avoid duplicate output when several apps are created in one process
    for handler in logger.handlers[:]:
        if getattr(handler, _HANDLER_MARKER, False):
            logger.removeHandler(handler)
            handler.close()


def setup_app_logging(app: Flask) -> None:
    """
    Configure application logging.

    Sets up console output with the request id, a rotating JSON log file
    when ``LOG_TO_FILE`` is enabled, and Sentry when ``SENTRY_DSN`` is set.
    Handlers are attached to the Flask app logger and to the ``services``
    package logger.

    Args:
        app (Flask): The Flask application instance to configure logging for

    Returns:
        None: This function configures the application's logging system in-place
    """
    log_level = app.config.get('LOG_LEVEL', 'INFO')
    numeric_level = getattr(logging, log_level, logging.INFO)
    request_filter = RequestContextFilter()

    handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    console_handler.addFilter(request_filter)
    console_handler.setLevel(numeric_level)
    handlers.append(_mark(console_handler))

    log_path = None
    if app.config.get('LOG_TO_FILE'):
        log_dir = app.config.get('LOG_DIR') or 'logs'
        os.makedirs(log_dir, exist_ok=True)
        log_path = os.path.join(log_dir, LOG_FILE_NAME)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path, maxBytes=LOG_FILE_MAX_BYTES, backupCount=LOG_FILE_BACKUP_COUNT
        )
        file_handler.setFormatter(JsonFormatter())
        file_handler.addFilter(request_filter)
        file_handler.setLevel(numeric_level)
        handlers.append(_mark(file_handler))

    loggers = [app.logger] + [logging.getLogger(name) for name in APPLICATION_LOGGERS]
    for logger in loggers:
        _reset_handlers(logger)
        logger.setLevel(numeric_level)
        for handler in handlers:
            logger.addHandler(handler)

    if app.config.get('SENTRY_DSN'):
        sentry_sdk.init(
            dsn=app.config['SENTRY_DSN'],
            integrations=[FlaskIntegration()],
            environment=app.config.get('ENVIRONMENT'),
            release=app.config.get('VERSION', 'unknown'),
            send_default_pii=False,
            traces_sample_rate=app.config.get('SENTRY_TRACES_SAMPLE_RATE', 0.0)
        )
        app.logger.info("Sentry error reporting initialized")

    app.logger.debug(
        "Application logging initialized (level=%s, file=%s)", log_level, log_path or 'disabled'
    )

"""
CLI package for the Newsletter Signup Service.

Commands are registered on the Flask CLI, so they run inside an application
context with the configured services:

    flask --app app reports send-digest --label "Weekly Report"
    flask --app app reports send-test
    flask --app app reports recent --limit 10
"""

import logging

from flask import Flask

from .cli_constants import EXIT_ERROR, EXIT_SUCCESS
from .commands import reports_cli

# Initialize logger
logger = logging.getLogger(__name__)

__version__ = '1.0.0'


def register_cli_commands(app: Flask) -> None:
    """
    Register all CLI command groups with the Flask application.

    Args:
        app: Flask application instance
    """
    app.cli.add_command(reports_cli)


__all__ = ['register_cli_commands', 'reports_cli', 'EXIT_SUCCESS', 'EXIT_ERROR']

"""
Main application entry point for the Newsletter Signup Service.

This module serves as the WSGI entry point (``app:app``) and as the target of
the Flask CLI (``flask --app app reports ...``). The environment is detected
from ``ENVIRONMENT`` / ``FLASK_ENV``; see ``config`` for the available settings.
"""

import logging
import os

from core.factory import create_app

try:
    app = create_app()
except ValueError as e:
    logging.critical("Application initialization failed: %s", e)
    raise

if __name__ == '__main__':
    app.run(port=int(os.environ.get('PORT', 5000)))

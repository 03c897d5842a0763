"""
Flask extensions initialization module for the Newsletter Signup Service.

Extensions are created here as module-level instances and bound to the
application in ``init_extensions`` during application creation, which keeps
them importable without an app and avoids circular imports.
"""

import logging

from flask_cors import CORS

# Initialize logger
logger = logging.getLogger(__name__)

cors = CORS()
"""
Cross-Origin Resource Sharing support.

The signup form is usually served from a different origin than the API, so
every ``/api/*`` route answers CORS requests from ``CORS_ORIGINS``.
"""


def _parse_origins(value):
    if isinstance(value, (list, tuple)):
        return list(value)
    origins = [origin.strip() for origin in str(value or '*').split(',') if origin.strip()]
    if not origins or origins == ['*']:
        return '*'
    return origins


def init_extensions(app):
    """
    Initialize all extensions with the Flask app.

    Args:
        app: Flask application instance
    """
    origins = _parse_origins(app.config.get('CORS_ORIGINS'))
    cors.init_app(app, resources={r"/api/*": {"origins": origins}})
    logger.debug("CORS enabled for /api/* (origins=%s)", origins)


__all__ = ['cors', 'init_extensions']

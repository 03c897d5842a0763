"""
API package for the Newsletter Signup Service.

This package provides the JSON endpoints of the service:

- Signup: ``POST /api/signup`` accepts a signup from the website form
- Reports: ``POST /api/reports/digest`` and ``POST /api/reports/test``
  trigger the signup digest email

Every failure is answered with ``{"success": false, "message": ...}``.
"""

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from .reports import reports_api
from .signup import signup_api


def register_api_routes(app: Flask) -> None:
    """
    Register the API blueprints and JSON error handling.

    Args:
        app: The Flask application instance
    """
    app.register_blueprint(signup_api)
    app.register_blueprint(reports_api)

    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        """Answer HTTP errors on API routes with the JSON error shape"""
        if not request.path.startswith('/api/'):
            return e
        return jsonify({'success': False, 'message': e.description or e.name}), e.code


__all__ = ['register_api_routes', 'signup_api', 'reports_api']

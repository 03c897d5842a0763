"""
Health check endpoint for the Newsletter Signup Service.
"""

from typing import Tuple

from flask import Blueprint, Response, current_app, jsonify


def register_health_endpoints(app):
    """Register health check endpoints with the Flask application."""
    health_bp = Blueprint('health', __name__, url_prefix='/api/health')

    @health_bp.route('', methods=['GET'])
    def basic_health_check() -> Tuple[Response, int]:
        """
        Basic liveness check.

        Also reports whether signups are currently written to the store, so
        a read-only deployment is visible from the outside.

        Returns:
            Tuple[Response, int]: JSON response with status and HTTP status code
        """
        return jsonify({
            "status": "ok",
            "message": "Server running fine",
            "persistence_enabled": bool(current_app.config.get('SIGNUP_PERSISTENCE_ENABLED')),
        }), 200

    app.register_blueprint(health_bp)

"""
Newsletter Signup Service application factory.

This module provides the application factory function for creating Flask
application instances with the appropriate configuration, logging, extensions,
services, routes and CLI commands.
"""

import logging
import uuid
from typing import Any, Dict, Optional

from flask import Flask, g, request

from api import register_api_routes
from cli import register_cli_commands
from config import get_config
from extensions import init_extensions
from services import init_services
from .health import register_health_endpoints
from .loggings import setup_app_logging

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = 'X-Request-ID'


def create_app(config_name: Optional[str] = None,
               config_overrides: Optional[Dict[str, Any]] = None) -> Flask:
    """
    Create and configure a Flask application instance.

    Args:
        config_name (str, optional): Name of the configuration to use ('development',
                                     'production', 'testing'). Defaults to None, in
                                     which case the environment is detected.
        config_overrides (dict, optional): Values applied on top of the loaded
                                           configuration, before services are built.

    Returns:
        Flask: Configured Flask application instance ready to serve requests
    """
    app = Flask(__name__)

    config_obj = get_config(config_name)
    config_obj.init_app(app)
    if config_overrides:
        app.config.update(config_overrides)

    setup_app_logging(app)
    init_extensions(app)
    init_services(app)
    register_request_hooks(app)

    register_api_routes(app)
    register_health_endpoints(app)
    register_cli_commands(app)

    app.logger.info(
        "Application started (environment=%s, persistence=%s, transport=%s)",
        app.config.get('ENVIRONMENT'),
        app.config.get('SIGNUP_PERSISTENCE_ENABLED'),
        app.config.get('EMAIL_TRANSPORT'),
    )
    return app


def register_request_hooks(app: Flask) -> None:
    """
    Assign a request id to every request and echo it in the response.

    The id is taken from the ``X-Request-ID`` header when the caller sends
    one, otherwise a new one is generated.
    """

    @app.before_request
    def assign_request_id():
        g.request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex

    @app.after_request
    def add_request_id_header(response):
        request_id = g.get('request_id')
        if request_id:
            response.headers[REQUEST_ID_HEADER] = request_id
        return response

"""
Core package for the Newsletter Signup Service.

Contains the application factory, logging setup and the health endpoint.
"""

from .factory import create_app, register_request_hooks
from .health import register_health_endpoints
from .loggings import setup_app_logging

__all__ = [
    'create_app',
    'register_request_hooks',
    'register_health_endpoints',
    'setup_app_logging',
]

"""
Signup API module for the Newsletter Signup Service.

Key endpoints:
- /api/signup: Record a newsletter signup and send the welcome email
"""

from .routes import signup_api

__all__ = ['signup_api']

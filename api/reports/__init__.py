"""
Reports API module for the Newsletter Signup Service.

Key endpoints:
- /api/reports/digest: Email the most recent signups to the report recipient
- /api/reports/test: Email a digest built from sample rows
"""

from .routes import reports_api

__all__ = ['reports_api']

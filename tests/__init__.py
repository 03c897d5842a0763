"""
Test package for the Newsletter Signup Service.

Fixtures live in ``conftest.py``: a temporary signup workbook, an in-memory
email transport, the Flask application built with the testing configuration,
and its test client and CLI runner.
"""

from .reports import reports_cli

__all__ = ['reports_cli']

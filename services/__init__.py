"""
Services Package for the Newsletter Signup Service.

This package provides the service layer: business logic that is independent
of the HTTP and CLI surfaces that call it. The services are built once per
application from its configuration and attached to the Flask app, so routes
and commands share one store and one email transport.

Services:
- SignupStore: spreadsheet-backed signup table
- EmailService: outbound email transport
- NewsletterService: confirmation and digest emails
- SignupService: signup submission workflow
- ReportService: digest of recent signups
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from flask import current_app

from .service_constants import DEFAULT_REPORT_LIMIT, DEFAULT_SHEET_NAME, __version__
from .email_service import DeliveryError, EmailService, create_email_service
from .newsletter_service import NewsletterService, create_newsletter_service
from .report_service import ReportResult, ReportService
from .signup_service import (
    ChildrenNames,
    ChildrenNamesKind,
    SignupResult,
    SignupService,
    ValidationError,
    normalize_children_names,
)
from .signup_store import SignupStore, StoreError

logger = logging.getLogger(__name__)

EXTENSION_KEY = 'signup_services'


@dataclass
class SignupServices:
    store: SignupStore
    email: EmailService
    newsletter: NewsletterService
    signups: SignupService
    reports: ReportService


def create_services(config: Mapping[str, Any],
                    email_service: Optional[EmailService] = None) -> SignupServices:
    """
    Build the service graph from application configuration.

    Args:
        config: Flask configuration mapping
        email_service: Transport override, used by tests

    Returns:
        SignupServices sharing one store and one email transport
    """
    store = SignupStore(
        config['SIGNUP_STORE_PATH'],
        sheet_name=config.get('SIGNUP_SHEET_NAME', DEFAULT_SHEET_NAME),
    )
    email = email_service or create_email_service(config)
    newsletter = create_newsletter_service(config, email)
    persistence_enabled = bool(config.get('SIGNUP_PERSISTENCE_ENABLED', True))

    if not persistence_enabled:
        logger.info("Signup persistence disabled; signups will not be written to %s", store.path)

    return SignupServices(
        store=store,
        email=email,
        newsletter=newsletter,
        signups=SignupService(store, newsletter, persistence_enabled=persistence_enabled),
        reports=ReportService(store, newsletter, limit=config.get('REPORT_LIMIT', DEFAULT_REPORT_LIMIT)),
    )


def init_services(app, email_service: Optional[EmailService] = None) -> SignupServices:
    services = create_services(app.config, email_service=email_service)
    app.extensions[EXTENSION_KEY] = services
    return services


def get_services() -> SignupServices:
    return current_app.extensions[EXTENSION_KEY]


__all__ = [
    '__version__',
    'ChildrenNames',
    'ChildrenNamesKind',
    'DeliveryError',
    'EmailService',
    'NewsletterService',
    'ReportResult',
    'ReportService',
    'SignupResult',
    'SignupService',
    'SignupServices',
    'SignupStore',
    'StoreError',
    'ValidationError',
    'create_services',
    'get_services',
    'init_services',
    'normalize_children_names',
]

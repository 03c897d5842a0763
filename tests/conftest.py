"""
Test fixtures for the Newsletter Signup Service.

This module provides the pytest fixtures shared by the test suite:

- A temporary spreadsheet path per test
- An in-memory email transport that records messages instead of sending them
- The Flask application built by the factory with the testing configuration
- Test client and CLI runner
- Stand-alone services for tests that do not need an application
"""

from datetime import date
from typing import Any, Dict, List

import pytest
from flask import Flask
from flask.testing import FlaskClient, FlaskCliRunner

from core.factory import create_app
from services import init_services
from services.email_service import EmailService
from services.newsletter_service import NewsletterService
from services.signup_service import SignupService
from services.signup_store import SignupStore

FIXED_DAY = date(2025, 11, 2)


class FakeEmailService(EmailService):
    """
    Email transport that keeps sent messages in memory.

    Set ``fail`` to make every send report a provider error.
    """

    def __init__(self, fail: bool = False):
        super().__init__(transport='log')
        self.sent: List[Dict[str, Any]] = []
        self.fail = fail

    def send(self, params: Dict[str, Any]) -> Dict[str, Any]:
        if self.fail:
            return {'error': {'message': 'provider unavailable', 'name': 'api_error'}}
        message = dict(params)
        message['from'] = message.get('from') or self.from_email
        self.sent.append(message)
        return {'data': {'id': f"fake-{len(self.sent)}"}}


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch) -> None:
    """Keep the host environment from changing the loaded configuration."""
    for key in ('VERCEL', 'SIGNUP_PERSISTENCE_ENABLED', 'EMAIL_TRANSPORT', 'SIGNUP_STORE_PATH',
                'REPORT_LIMIT', 'SENTRY_DSN', 'LOG_TO_FILE'):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def store_path(tmp_path):
    """Location of the signup workbook for one test."""
    return tmp_path / 'signups.xlsx'


@pytest.fixture
def store(store_path) -> SignupStore:
    return SignupStore(store_path)


@pytest.fixture
def email_service() -> FakeEmailService:
    return FakeEmailService()


@pytest.fixture
def newsletter(email_service) -> NewsletterService:
    return NewsletterService(
        email_service,
        report_recipient='reports@example.com',
        brand_name='Test Brand',
        support_email='help@example.com',
    )


@pytest.fixture
def signup_service(store, newsletter) -> SignupService:
    return SignupService(store, newsletter, today=lambda: FIXED_DAY)


@pytest.fixture
def app(store_path, email_service) -> Flask:
    """
    Create test application instance.

    Returns:
        Flask application configured for testing, writing signups to a
        temporary workbook and delivering email to the in-memory transport.
    """
    app = create_app('testing', {'SIGNUP_STORE_PATH': str(store_path)})
    init_services(app, email_service=email_service)
    yield app


@pytest.fixture
def client(app) -> FlaskClient:
    return app.test_client()


@pytest.fixture
def runner(app) -> FlaskCliRunner:
    return app.test_cli_runner()

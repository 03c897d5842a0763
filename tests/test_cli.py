"""
Tests for the ``flask reports`` command group.
"""

from datetime import date

from flask import Flask

from models.signup_record import SignupRecord
from services import get_services


def add_signup(app: Flask, name: str, email: str) -> None:
    with app.app_context():
        get_services().store.append(SignupRecord(date=date(2025, 11, 2), parent_name=name, parent_email=email))


class TestReportsCommands:

    def test_send_digest_without_signups(self, runner, email_service) -> None:
        result = runner.invoke(args=['reports', 'send-digest'])

        assert result.exit_code == 0
        assert 'No new signups' in result.output
        assert email_service.sent == []

    def test_send_digest_with_label(self, app, runner, email_service) -> None:
        add_signup(app, 'Jane Doe', 'jane@example.com')

        result = runner.invoke(args=['reports', 'send-digest', '--label', 'Weekly Report'])

        assert result.exit_code == 0
        assert 'Weekly Report sent with 1 signups' in result.output
        assert email_service.sent[0]['subject'] == 'Weekly Report - New Newsletter Signups'

    def test_send_digest_failure_exits_with_error(self, app, runner, email_service) -> None:
        add_signup(app, 'Jane Doe', 'jane@example.com')
        email_service.fail = True

        result = runner.invoke(args=['reports', 'send-digest'])

        assert result.exit_code == 1

    def test_send_test(self, runner, email_service) -> None:
        result = runner.invoke(args=['reports', 'send-test'])

        assert result.exit_code == 0
        assert 'Test report sent to' in result.output
        assert len(email_service.sent) == 1

    def test_send_test_failure_exits_with_error(self, runner, email_service) -> None:
        email_service.fail = True

        result = runner.invoke(args=['reports', 'send-test'])

        assert result.exit_code == 1

    def test_recent(self, app, runner) -> None:
        add_signup(app, 'Jane Doe', 'jane@example.com')
        add_signup(app, 'John Roe', 'john@example.com')

        result = runner.invoke(args=['reports', 'recent', '--limit', '1'])

        assert result.exit_code == 0
        assert 'John Roe' in result.output
        assert 'Jane Doe' not in result.output

    def test_recent_empty(self, runner) -> None:
        result = runner.invoke(args=['reports', 'recent'])

        assert result.exit_code == 0
        assert 'No signups found' in result.output

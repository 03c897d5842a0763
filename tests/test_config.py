"""
Tests for configuration loading and validation.
"""

import pytest
from flask import Flask

from config import DevelopmentConfig, ProductionConfig, TestingConfig, detect_environment, get_config


def load(config_class) -> Flask:
    app = Flask(__name__)
    config_class.init_app(app)
    return app


class TestConfigSelection:

    def test_registry(self) -> None:
        assert get_config('testing') is TestingConfig
        assert get_config('production') is ProductionConfig
        assert get_config('development') is DevelopmentConfig

    def test_unknown_name_falls_back_to_development(self) -> None:
        assert get_config('qa') is DevelopmentConfig

    def test_environment_is_detected_on_every_call(self, monkeypatch) -> None:
        monkeypatch.setenv('ENVIRONMENT', 'testing')
        assert get_config() is TestingConfig

        monkeypatch.setenv('ENVIRONMENT', 'production')
        assert get_config() is ProductionConfig

    def test_detect_environment(self, monkeypatch) -> None:
        monkeypatch.setenv('ENVIRONMENT', 'production')
        assert detect_environment() == 'production'

        monkeypatch.setenv('ENVIRONMENT', 'bogus')
        assert detect_environment() == 'development'

        monkeypatch.delenv('ENVIRONMENT')
        monkeypatch.setenv('FLASK_ENV', 'testing')
        assert detect_environment() == 'testing'


class TestPersistenceFlag:

    def test_enabled_by_default(self) -> None:
        assert load(TestingConfig).config['SIGNUP_PERSISTENCE_ENABLED'] is True

    def test_disabled_on_vercel(self, monkeypatch) -> None:
        monkeypatch.setenv('VERCEL', '1')
        assert load(TestingConfig).config['SIGNUP_PERSISTENCE_ENABLED'] is False

    def test_explicit_setting_wins(self, monkeypatch) -> None:
        monkeypatch.setenv('VERCEL', '1')
        monkeypatch.setenv('SIGNUP_PERSISTENCE_ENABLED', 'true')
        assert load(TestingConfig).config['SIGNUP_PERSISTENCE_ENABLED'] is True


class TestEnvironmentOverrides:

    def test_typed_values(self, monkeypatch) -> None:
        monkeypatch.setenv('REPORT_LIMIT', '12')
        monkeypatch.setenv('SMTP_USE_TLS', 'false')
        monkeypatch.setenv('SIGNUP_STORE_PATH', '/data/signups.xlsx')
        monkeypatch.setenv('LOG_LEVEL', 'debug')

        config = load(TestingConfig).config

        assert config['REPORT_LIMIT'] == 12
        assert config['SMTP_USE_TLS'] is False
        assert config['SIGNUP_STORE_PATH'] == '/data/signups.xlsx'
        assert config['LOG_LEVEL'] == 'DEBUG'

    def test_invalid_integer_keeps_default(self, monkeypatch) -> None:
        monkeypatch.setenv('REPORT_LIMIT', 'many')
        assert load(TestingConfig).config['REPORT_LIMIT'] == 5


class TestValidation:

    def test_unknown_transport(self, monkeypatch) -> None:
        monkeypatch.setenv('EMAIL_TRANSPORT', 'fax')
        with pytest.raises(ValueError, match='EMAIL_TRANSPORT'):
            load(TestingConfig)

    def test_non_positive_report_limit(self, monkeypatch) -> None:
        monkeypatch.setenv('REPORT_LIMIT', '0')
        with pytest.raises(ValueError, match='REPORT_LIMIT'):
            load(TestingConfig)

    def test_production_requires_api_key(self, monkeypatch) -> None:
        monkeypatch.delenv('RESEND_API_KEY', raising=False)
        with pytest.raises(ValueError, match='RESEND_API_KEY'):
            load(ProductionConfig)

    def test_production_smtp_requires_server(self, monkeypatch) -> None:
        monkeypatch.setenv('EMAIL_TRANSPORT', 'smtp')
        monkeypatch.delenv('SMTP_SERVER', raising=False)
        with pytest.raises(ValueError, match='SMTP_SERVER'):
            load(ProductionConfig)

    def test_production_with_key(self, monkeypatch) -> None:
        monkeypatch.setenv('RESEND_API_KEY', 're_live')
        config = load(ProductionConfig).config
        assert config['EMAIL_TRANSPORT'] == 'resend'
        assert config['LOG_TO_FILE'] is True

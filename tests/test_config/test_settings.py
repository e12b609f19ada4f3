"""Testes para config.settings (carga de env e validação)."""

from __future__ import annotations

import pytest

from config.settings import (
    BaseSettings,
    LinePaySettings,
    MessengerSettings,
    TwilioSettings,
    get_base_settings,
    get_line_pay_settings,
    get_messenger_settings,
    get_twilio_settings,
)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    for getter in (
        get_base_settings,
        get_messenger_settings,
        get_twilio_settings,
        get_line_pay_settings,
    ):
        getter.cache_clear()
    yield
    for getter in (
        get_base_settings,
        get_messenger_settings,
        get_twilio_settings,
        get_line_pay_settings,
    ):
        getter.cache_clear()


class TestBaseSettings:
    """Settings comuns."""

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "prod")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("SERVICE_NAME", "bot")

        settings = get_base_settings()

        assert settings.is_production
        assert settings.log_level == "DEBUG"
        assert settings.service_name == "bot"
        assert settings.validate() == []

    def test_invalid_log_level(self) -> None:
        assert BaseSettings(log_level="LOUD").validate() == ["LOG_LEVEL inválido: LOUD"]

    def test_cached(self) -> None:
        assert get_base_settings() is get_base_settings()


class TestMessengerSettings:
    """Settings do Messenger."""

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MESSENGER_ACCESS_TOKEN", "tok")
        monkeypatch.setenv("MESSENGER_APP_SECRET", "secret")
        monkeypatch.delenv("MESSENGER_API_VERSION", raising=False)
        monkeypatch.delenv("MESSENGER_SKIP_APP_SECRET_PROOF", raising=False)

        settings = get_messenger_settings()

        assert settings.api_version == "v12.0"
        assert settings.skip_app_secret_proof is None
        assert settings.should_skip_app_secret_proof is False
        assert settings.validate() == []

    def test_skip_defaults_to_missing_secret(self) -> None:
        assert MessengerSettings(access_token="tok").should_skip_app_secret_proof is True

    def test_explicit_signing_without_secret_is_invalid(self) -> None:
        errors = MessengerSettings(access_token="tok", skip_app_secret_proof=False).validate()
        assert any("MESSENGER_APP_SECRET" in error for error in errors)

    def test_missing_token(self) -> None:
        assert "MESSENGER_ACCESS_TOKEN não configurado" in MessengerSettings().validate()

    def test_skip_flag_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MESSENGER_SKIP_APP_SECRET_PROOF", "true")
        monkeypatch.setenv("MESSENGER_APP_SECRET", "secret")
        assert get_messenger_settings().should_skip_app_secret_proof is True


class TestProviderSettings:
    """Twilio e LINE Pay."""

    def test_twilio_required_fields(self) -> None:
        errors = TwilioSettings().validate()
        assert errors == [
            "TWILIO_ACCOUNT_SID não configurado",
            "TWILIO_AUTH_TOKEN não configurado",
            "TWILIO_PHONE_NUMBER não configurado",
        ]

    def test_twilio_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TWILIO_ACCOUNT_SID", "AC1")
        monkeypatch.setenv("TWILIO_AUTH_TOKEN", "tok")
        monkeypatch.setenv("TWILIO_PHONE_NUMBER", "+1")
        assert get_twilio_settings().validate() == []

    def test_line_pay_sandbox_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LINE_PAY_CHANNEL_ID", "id")
        monkeypatch.setenv("LINE_PAY_CHANNEL_SECRET", "secret")
        monkeypatch.setenv("LINE_PAY_SANDBOX", "yes")

        settings = get_line_pay_settings()

        assert settings.sandbox is True
        assert settings.validate() == []

    def test_line_pay_required_fields(self) -> None:
        assert len(LinePaySettings().validate()) == 2

"""Testes do bootstrap: factory do adapter e validação de settings."""

from __future__ import annotations

import pytest

from app.bootstrap import create_adapter, validate_runtime_settings
from config.settings import AlexaSettings, get_alexa_settings, get_base_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache(monkeypatch: pytest.MonkeyPatch):
    for name in ("ENVIRONMENT", "ALEXA_REPLY_TIMEOUT_SECONDS", "ALEXA_WEBHOOK_PATH"):
        monkeypatch.delenv(name, raising=False)
    get_base_settings.cache_clear()
    get_alexa_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_alexa_settings.cache_clear()


class TestCreateAdapter:
    """Wiring a partir de AlexaSettings."""

    def test_mounted_adapter_exposes_router(self) -> None:
        adapter = create_adapter(AlexaSettings(service_id="svc", reply_timeout_seconds=5))

        assert adapter.service_id() == "svc"
        assert adapter.correlation_table.timeout_seconds == 5
        assert adapter.get_router() is not None

    def test_own_server_adapter_has_no_router(self) -> None:
        adapter = create_adapter(AlexaSettings(http_port=8099))
        assert adapter.get_router() is None

    def test_empty_service_id_generates_one(self) -> None:
        adapter = create_adapter(AlexaSettings())
        assert adapter.service_id()


class TestValidateRuntimeSettings:
    """Falha rápida fora de development."""

    def test_development_only_warns(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ALEXA_REPLY_TIMEOUT_SECONDS", "-1")
        validate_runtime_settings()

    def test_production_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("ALEXA_WEBHOOK_PATH", "webhook")

        with pytest.raises(RuntimeError, match="ALEXA_WEBHOOK_PATH"):
            validate_runtime_settings()

    def test_valid_settings_pass_in_production(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        validate_runtime_settings()

"""Testes do normalizer de requisições Alexa."""

from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from api.normalizers.alexa import AlexaRequestNormalizer, extract_request_fields, normalize_request
from api.normalizers.alexa.extractor import get_path
from utils.errors import NormalizationError


def _body(request: dict, session: dict | None = None) -> dict:
    return {
        "request": request,
        "session": session or {"application": {"id": "a"}, "user": {"id": "u"}},
    }


class TestNormalizeRequest:
    """Testes para normalize_request."""

    def test_intent_request_scenario(self) -> None:
        """IntentRequest usa o nome do intent e preserva slots/application/user."""
        body = _body({"type": "IntentRequest", "intent": {"name": "Hello", "slots": {}}})

        event = normalize_request(body, "key-1")

        assert event.to_message() == {
            "application": {"id": "a"},
            "intentName": "Hello",
            "requestType": "IntentRequest",
            "slots": {},
            "user": {"id": "u"},
            "correlationKey": "key-1",
        }

    @pytest.mark.parametrize("request_type", ["LaunchRequest", "SessionEndedRequest", "Custom"])
    def test_non_intent_request_uses_request_type(self, request_type: str) -> None:
        """Fora de IntentRequest, intent_name é o próprio request_type."""
        event = normalize_request(_body({"type": request_type}), "key")
        assert event.intent_name == request_type
        assert event.request_type == request_type

    def test_non_intent_request_ignores_nested_intent_name(self) -> None:
        """Mesmo com intent aninhado, o tipo prevalece fora de IntentRequest."""
        body = _body({"type": "LaunchRequest", "intent": {"name": "Other"}})
        assert normalize_request(body, "key").intent_name == "LaunchRequest"

    def test_intent_request_without_intent_name(self) -> None:
        """Caminho ausente resulta em intent_name None, sem erro."""
        event = normalize_request(_body({"type": "IntentRequest"}), "key")
        assert event.intent_name is None

    def test_slots_default_to_empty_mapping(self) -> None:
        """slots ausente vira dict vazio."""
        event = normalize_request(_body({"type": "IntentRequest", "intent": {"name": "X"}}), "k")
        assert event.slots == {}

    def test_slots_are_preserved(self) -> None:
        """slots presentes são repassados sem alteração."""
        slots = {"city": {"name": "city", "value": "Recife"}}
        body = _body({"type": "IntentRequest", "intent": {"name": "Weather", "slots": slots}})
        assert normalize_request(body, "k").slots == slots

    def test_generates_fresh_correlation_key(self) -> None:
        """Sem chave explícita, cada chamada gera uma chave nova."""
        body = _body({"type": "LaunchRequest"})
        first = normalize_request(body)
        second = normalize_request(body)
        assert first.correlation_key
        assert first.correlation_key != second.correlation_key

    def test_event_is_immutable(self) -> None:
        """InboundEvent é congelado após a criação."""
        event = normalize_request(_body({"type": "LaunchRequest"}), "k")
        with pytest.raises(PydanticValidationError):
            event.request_type = "Other"  # type: ignore[misc]

    def test_class_normalizer_delegates(self) -> None:
        """AlexaRequestNormalizer usa a chave recebida."""
        event = AlexaRequestNormalizer().normalize(_body({"type": "LaunchRequest"}), "abc")
        assert event.correlation_key == "abc"


class TestMalformedPayloads:
    """Corpos malformados levantam NormalizationError."""

    @pytest.mark.parametrize(
        ("payload", "reason"),
        [
            ([], "payload_not_object"),
            ({}, "request_missing"),
            ({"request": {"type": "LaunchRequest"}}, "session_missing"),
            ({"request": {}, "session": {}}, "request_type_missing"),
            ({"request": {"type": 5}, "session": {}}, "request_type_missing"),
        ],
    )
    def test_raises_normalization_error(self, payload: object, reason: str) -> None:
        with pytest.raises(NormalizationError, match=reason):
            extract_request_fields(payload)

    def test_missing_application_and_user_default_to_empty(self) -> None:
        """session sem application/user não é erro."""
        fields = extract_request_fields({"request": {"type": "LaunchRequest"}, "session": {}})
        assert fields["application"] == {}
        assert fields["user"] == {}


class TestGetPath:
    """Testes do helper get_path."""

    def test_returns_nested_value(self) -> None:
        assert get_path({"a": {"b": 1}}, "a", "b") == 1

    def test_missing_path_returns_none(self) -> None:
        assert get_path({"a": {}}, "a", "b", "c") is None

    def test_non_dict_intermediate_returns_none(self) -> None:
        assert get_path({"a": "text"}, "a", "b") is None

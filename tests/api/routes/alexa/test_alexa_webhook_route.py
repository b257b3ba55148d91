"""Testes do endpoint de webhook Alexa (ASGI em processo)."""

from __future__ import annotations

import asyncio
import json
from typing import TYPE_CHECKING, Any

import httpx
import pytest

from app.adapter import AlexaAdapter
from app.app import create_app
from app.infra.http import HttpOptions

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from app.protocols.models import InboundEvent

WEBHOOK_URL = "/webhook/alexa"

INTENT_BODY: dict[str, Any] = {
    "request": {"type": "IntentRequest", "intent": {"name": "Hello", "slots": {}}},
    "session": {"application": {"id": "a"}, "user": {"id": "u"}},
}


async def _reply_to_all(
    adapter: AlexaAdapter,
    events: AsyncIterator[InboundEvent],
    content: str,
) -> None:
    async for event in events:
        await adapter.send(
            {
                "to": {"id": event.correlation_key},
                "object": {"type": "Note", "content": content, "name": event.intent_name},
            }
        )


def _client(adapter: AlexaAdapter) -> httpx.AsyncClient:
    transport = httpx.ASGITransport(app=create_app(adapter))
    return httpx.AsyncClient(transport=transport, base_url="http://testserver")


class TestAlexaWebhookRoute:
    """GET e POST com resposta assíncrona."""

    @pytest.mark.asyncio
    async def test_post_returns_platform_response(self) -> None:
        adapter = AlexaAdapter(reply_timeout_seconds=5)
        await adapter.connect()
        consumer = asyncio.create_task(_reply_to_all(adapter, adapter.listen(), "hello"))

        async with _client(adapter) as client:
            response = await client.post(WEBHOOK_URL, json=INTENT_BODY)

        await adapter.disconnect()
        await consumer

        assert response.status_code == 200
        assert response.json() == {
            "response": {
                "outputSpeech": {"type": "PlainText", "text": "hello"},
                "card": {"type": "Simple", "title": "Hello", "content": "hello"},
                "shouldEndSession": True,
            }
        }

    @pytest.mark.asyncio
    async def test_get_is_handled_like_post(self) -> None:
        adapter = AlexaAdapter(reply_timeout_seconds=5)
        await adapter.connect()
        consumer = asyncio.create_task(
            _reply_to_all(adapter, adapter.listen(), "<speak>hi</speak>")
        )

        async with _client(adapter) as client:
            response = await client.request(
                "GET",
                WEBHOOK_URL,
                content=json.dumps(INTENT_BODY),
                headers={"content-type": "application/json"},
            )

        await adapter.disconnect()
        await consumer

        assert response.status_code == 200
        assert response.json()["response"]["outputSpeech"] == {
            "type": "SSML",
            "ssml": "<speak>hi</speak>",
        }

    @pytest.mark.asyncio
    async def test_configured_path_answers_without_redirect(self) -> None:
        """Com e sem barra final, sem 307."""
        adapter = AlexaAdapter(reply_timeout_seconds=0.05)
        await adapter.connect()

        async with _client(adapter) as client:
            bare = await client.post(WEBHOOK_URL, json=INTENT_BODY)
            slashed = await client.post(f"{WEBHOOK_URL}/", json=INTENT_BODY)

        assert bare.status_code == 200
        assert slashed.status_code == 200

    @pytest.mark.asyncio
    async def test_expired_reply_returns_empty_200(self) -> None:
        adapter = AlexaAdapter(reply_timeout_seconds=0.05)
        await adapter.connect()

        async with _client(adapter) as client:
            response = await client.post(WEBHOOK_URL, json=INTENT_BODY)

        assert response.status_code == 200
        assert response.content == b""
        assert adapter.pending_replies == 0

    @pytest.mark.asyncio
    async def test_invalid_json_is_acknowledged(self) -> None:
        adapter = AlexaAdapter()
        await adapter.connect()

        async with _client(adapter) as client:
            response = await client.post(
                WEBHOOK_URL,
                content=b"{not json",
                headers={"content-type": "application/json"},
            )

        assert response.status_code == 200
        assert response.content == b""

    @pytest.mark.asyncio
    async def test_malformed_body_is_acknowledged(self) -> None:
        adapter = AlexaAdapter()
        await adapter.connect()

        async with _client(adapter) as client:
            response = await client.post(WEBHOOK_URL, json={"session": {}})

        assert response.status_code == 200
        assert response.content == b""
        assert adapter.pending_replies == 0

    @pytest.mark.asyncio
    async def test_adapter_with_own_server_is_not_mounted(self) -> None:
        adapter = AlexaAdapter(http=HttpOptions(port=0))

        async with _client(adapter) as client:
            response = await client.post(WEBHOOK_URL, json=INTENT_BODY)

        assert response.status_code == 404

"""Testes da CorrelationTable."""

from __future__ import annotations

import asyncio

import pytest

from app.coordinators.alexa import CorrelationTable, ReplyState
from app.protocols.models import Card, OutputSpeech, PlatformResponse, ResponseBody


def _response(text: str = "hello") -> PlatformResponse:
    return PlatformResponse(
        response=ResponseBody(
            output_speech=OutputSpeech(type="PlainText", text=text),
            card=Card(content=text),
        )
    )


class _Recorder:
    def __init__(self) -> None:
        self.replies: list[PlatformResponse] = []
        self.expired = 0

    def on_reply(self, response: PlatformResponse) -> None:
        self.replies.append(response)

    def on_expire(self) -> None:
        self.expired += 1


class TestCorrelationTableDelivery:
    """Registro seguido de entrega."""

    @pytest.mark.asyncio
    async def test_deliver_invokes_callback_once(self) -> None:
        """Entrega dentro do prazo chama o callback uma vez e remove o registro."""
        table = CorrelationTable(timeout_seconds=5)
        recorder = _Recorder()
        response = _response()

        assert table.register("k1", recorder.on_reply, recorder.on_expire) is True
        assert table.state("k1") is ReplyState.AWAITING_REPLY
        assert table.deliver("k1", response) is True

        assert recorder.replies == [response]
        assert recorder.expired == 0
        assert "k1" not in table
        assert table.pending_count == 0
        assert table.state("k1") is ReplyState.REPLIED

    @pytest.mark.asyncio
    async def test_second_delivery_is_noop(self) -> None:
        table = CorrelationTable(timeout_seconds=5)
        recorder = _Recorder()
        table.register("k1", recorder.on_reply)

        table.deliver("k1", _response("first"))
        assert table.deliver("k1", _response("second")) is False

        assert len(recorder.replies) == 1
        assert recorder.replies[0].response.output_speech.text == "first"

    @pytest.mark.asyncio
    async def test_expire_after_delivery_is_noop(self) -> None:
        table = CorrelationTable(timeout_seconds=5)
        recorder = _Recorder()
        table.register("k1", recorder.on_reply, recorder.on_expire)
        table.deliver("k1", _response())

        assert table.expire("k1") is False
        assert recorder.expired == 0
        assert table.state("k1") is ReplyState.REPLIED

    @pytest.mark.asyncio
    async def test_delivery_cancels_timer(self) -> None:
        """Após a entrega o timer não dispara a expiração."""
        table = CorrelationTable(timeout_seconds=0.05)
        recorder = _Recorder()
        table.register("k1", recorder.on_reply, recorder.on_expire)
        table.deliver("k1", _response())

        await asyncio.sleep(0.1)

        assert recorder.expired == 0
        assert table.state("k1") is ReplyState.REPLIED

    def test_unmatched_delivery_is_silent(self) -> None:
        """Entrega para chave desconhecida não levanta erro."""
        table = CorrelationTable()
        assert table.deliver("unknown", _response()) is False
        assert table.state("unknown") is None

    @pytest.mark.asyncio
    async def test_failing_callback_does_not_propagate(self) -> None:
        table = CorrelationTable(timeout_seconds=5)

        def _boom(_: PlatformResponse) -> None:
            raise RuntimeError("boom")

        table.register("k1", _boom)
        assert table.deliver("k1", _response()) is True
        assert table.pending_count == 0


class TestCorrelationTableExpiry:
    """Registro sem entrega."""

    @pytest.mark.asyncio
    async def test_expires_without_invoking_reply(self) -> None:
        """Sem entrega, o registro é removido após o timeout."""
        table = CorrelationTable(timeout_seconds=0.05)
        recorder = _Recorder()
        table.register("k1", recorder.on_reply, recorder.on_expire)

        await asyncio.sleep(0.15)

        assert recorder.replies == []
        assert recorder.expired == 1
        assert table.pending_count == 0
        assert table.state("k1") is ReplyState.EXPIRED

    @pytest.mark.asyncio
    async def test_late_delivery_is_dropped(self) -> None:
        table = CorrelationTable(timeout_seconds=0.05)
        recorder = _Recorder()
        table.register("k1", recorder.on_reply)

        await asyncio.sleep(0.15)

        assert table.deliver("k1", _response()) is False
        assert recorder.replies == []

    @pytest.mark.asyncio
    async def test_manual_expire(self) -> None:
        table = CorrelationTable(timeout_seconds=5)
        recorder = _Recorder()
        table.register("k1", recorder.on_reply, recorder.on_expire)

        assert table.expire("k1") is True
        assert table.expire("k1") is False
        assert recorder.expired == 1


class TestCorrelationTableRegistration:
    """Casos de registro."""

    @pytest.mark.asyncio
    async def test_duplicate_key_keeps_first_registration(self) -> None:
        table = CorrelationTable(timeout_seconds=5)
        first, second = _Recorder(), _Recorder()

        assert table.register("k1", first.on_reply) is True
        assert table.register("k1", second.on_reply) is False

        table.deliver("k1", _response())
        assert len(first.replies) == 1
        assert second.replies == []

    def test_register_requires_running_loop(self) -> None:
        table = CorrelationTable()
        with pytest.raises(RuntimeError):
            table.register("k1", lambda _: None)

    def test_invalid_timeout_raises(self) -> None:
        with pytest.raises(ValueError, match="timeout_seconds"):
            CorrelationTable(timeout_seconds=0)

    def test_default_timeout_is_sixty_seconds(self) -> None:
        assert CorrelationTable().timeout_seconds == 60.0

    @pytest.mark.asyncio
    async def test_close_drops_pending_and_notifies(self) -> None:
        table = CorrelationTable(timeout_seconds=5)
        recorders = [_Recorder(), _Recorder()]
        table.register("a", recorders[0].on_reply, recorders[0].on_expire)
        table.register("b", recorders[1].on_reply, recorders[1].on_expire)

        assert table.close() == 2

        assert table.pending_count == 0
        assert [r.expired for r in recorders] == [1, 1]
        assert table.register("c", lambda _: None) is False
        assert table.closed is True

    def test_reply_state_terminal(self) -> None:
        assert ReplyState.REPLIED.is_terminal
        assert ReplyState.EXPIRED.is_terminal
        assert not ReplyState.AWAITING_REPLY.is_terminal
        assert not ReplyState.RECEIVED.is_terminal

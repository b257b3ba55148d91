"""Servidor de webhook embutido.

Usado quando o adapter é configurado com host/porta próprios em vez de
ser montado num app FastAPI hospedeiro. O servidor uvicorn roda como
task no event loop corrente, sobre um socket aberto em ``listen()``:
falhas de bind chegam ao chamador como WebhookServerError.
"""

from __future__ import annotations

import asyncio
import logging
import socket
from dataclasses import dataclass
from typing import TYPE_CHECKING

import uvicorn
from fastapi import FastAPI

from config.settings import DEFAULT_WEBHOOK_PATH
from utils.errors import AdapterError

if TYPE_CHECKING:
    from fastapi import APIRouter

logger = logging.getLogger(__name__)

_STARTUP_POLL_SECONDS = 0.05


class WebhookServerError(AdapterError):
    """Servidor de webhook não pôde iniciar (bind ou startup)."""


@dataclass(frozen=True, slots=True)
class HttpOptions:
    """Endereço do servidor de webhook próprio."""

    host: str = "127.0.0.1"
    port: int = 8080
    path: str = DEFAULT_WEBHOOK_PATH


class WebhookServer:
    """Envolve um uvicorn.Server com listen()/close() assíncronos."""

    def __init__(
        self,
        options: HttpOptions,
        router: APIRouter,
        log_level: str = "info",
    ) -> None:
        if not options.path.startswith("/"):
            raise ValueError(f"webhook path deve começar com '/': {options.path!r}")
        self._options = options
        self._log_level = log_level.lower()
        self._app = FastAPI(title="alexa-adapter-webhook", docs_url=None, redoc_url=None)
        self._app.include_router(router, prefix=options.path)
        self._server: uvicorn.Server | None = None
        self._task: asyncio.Task[None] | None = None
        self._port: int | None = None

    @property
    def app(self) -> FastAPI:
        return self._app

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def port(self) -> int | None:
        """Porta efetivamente vinculada (resolve port=0)."""
        return self._port

    async def listen(self) -> None:
        """Inicia o servidor e aguarda o startup.

        Raises:
            WebhookServerError: endereço em uso ou falha no startup.
        """
        if self.running:
            return
        address = f"{self._options.host}:{self._options.port}"
        try:
            sock = socket.create_server((self._options.host, self._options.port))
        except OSError as exc:
            logger.error(
                "webhook_server_bind_failed",
                extra={"address": address, "error": str(exc)},
            )
            raise WebhookServerError(f"cannot bind webhook server to {address}: {exc}") from exc

        config = uvicorn.Config(
            self._app,
            log_level=self._log_level,
            lifespan="off",
        )
        server = uvicorn.Server(config)
        task = asyncio.create_task(server.serve(sockets=[sock]))

        while not server.started:
            if task.done():
                sock.close()
                cause = None if task.cancelled() else task.exception()
                raise WebhookServerError(
                    f"webhook server exited during startup on {address}"
                ) from cause
            await asyncio.sleep(_STARTUP_POLL_SECONDS)

        self._server = server
        self._task = task
        self._port = sock.getsockname()[1]
        logger.info(
            "webhook_server_listening",
            extra={"host": self._options.host, "port": self._port},
        )

    async def close(self) -> None:
        """Sinaliza encerramento e aguarda o término do servidor."""
        if self._server is None or self._task is None:
            return
        self._server.should_exit = True
        await self._task
        self._server = None
        self._task = None
        logger.info("webhook_server_closed", extra={"port": self._port})
        self._port = None

"""Entrypoint da aplicação alexa-adapter.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI) com o webhook
do adapter montado em ALEXA_WEBHOOK_PATH.

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080

Consumidores em processo obtêm o adapter em ``app.state.adapter`` e usam
``listen()``/``send()``.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import create_adapter, initialize_app, validate_runtime_settings
from config.logging import get_logger
from config.settings import get_alexa_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from app.adapter import AlexaAdapter

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


def create_app(adapter: AlexaAdapter | None = None) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        adapter: Adapter já construído (testes). Se None, usa a factory.

    Returns:
        Aplicação FastAPI configurada.
    """
    alexa_adapter = adapter or create_adapter()

    @asynccontextmanager
    async def lifespan(fastapi_app: FastAPI) -> AsyncGenerator[None, None]:
        """Conecta o adapter no startup e desconecta no shutdown."""
        logger.info("app_starting", extra={"service": "alexa-adapter"})
        validate_runtime_settings()
        await alexa_adapter.connect()

        yield

        logger.info("app_shutting_down", extra={"service": "alexa-adapter"})
        await alexa_adapter.disconnect()

    fastapi_app = FastAPI(
        title="alexa-adapter",
        description="Adapter de webhook Alexa Skills Kit para eventos normalizados",
        version="1.0.0",
        lifespan=lifespan,
    )
    fastapi_app.state.adapter = alexa_adapter
    fastapi_app.include_router(
        create_api_router(alexa_adapter, webhook_path=get_alexa_settings().webhook_path)
    )

    logger.info(
        "app_configured",
        extra={"service": "alexa-adapter", "service_id": alexa_adapter.service_id()},
    )
    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting alexa-adapter in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()

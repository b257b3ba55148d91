"""Agregador de rotas — registra health e o webhook do adapter.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router(adapter, webhook_path="/webhook/alexa"))
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter

from api.routes.health.router import router as health_router

if TYPE_CHECKING:
    from app.adapter import AlexaAdapter


def create_api_router(adapter: AlexaAdapter, webhook_path: str) -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Se o adapter roda o próprio servidor de webhook, apenas health é exposto.
    """
    api_router = APIRouter()

    # Health checks (sem prefixo para /health e /ready na raiz)
    api_router.include_router(health_router, tags=["health"])

    alexa_router = adapter.get_router()
    if alexa_router is not None:
        api_router.include_router(alexa_router, prefix=webhook_path, tags=["alexa"])

    return api_router

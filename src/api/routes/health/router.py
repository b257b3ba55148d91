"""Endpoints de health check."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service="alexa-adapter",
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe: adapter conectado e tamanho da tabela de correlação."""
    adapter = getattr(request.app.state, "adapter", None)
    connected = bool(adapter is not None and adapter.connected)
    payload = {
        "status": "ready" if connected else "not_ready",
        "checks": {
            "adapter": {
                "connected": connected,
                "service_id": adapter.service_id() if adapter is not None else None,
                "pending_replies": adapter.pending_replies if adapter is not None else 0,
            },
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    if not connected:
        logger.warning("readiness_adapter_not_connected")
    return JSONResponse(content=payload, status_code=200 if connected else 503)

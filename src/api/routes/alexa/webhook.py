"""Endpoint de webhook do Alexa Skills Kit.

Endpoints:
- GET e POST no prefixo, com ou sem barra final: recebimento de
  requisições de intent (tratamento idêntico)

Fluxo:
1. Decodifica o corpo JSON
2. O adapter normaliza, registra a resposta pendente e publica o evento
3. A requisição é respondida uma única vez: com o JSON da plataforma quando
   a resposta chega, ou 200 com corpo vazio quando expira ou o corpo é inválido
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

from api.connectors.alexa.webhook.receive import InvalidJsonError, parse_webhook_body
from app.observability import record_inbound_dropped

if TYPE_CHECKING:
    from app.adapter import AlexaAdapter

logger = logging.getLogger(__name__)


def create_webhook_router(adapter: AlexaAdapter) -> APIRouter:
    """Cria o router ligado a uma instância do adapter.

    O handler responde no próprio prefixo e com barra final, pois a
    plataforma não segue redirects. Deve ser montado com prefixo não vazio.
    """
    router = APIRouter()

    async def receive_webhook(request: Request) -> Response:
        raw_body = await request.body()
        try:
            payload = parse_webhook_body(raw_body)
        except InvalidJsonError as exc:
            logger.warning(
                "alexa_webhook_json_invalid",
                extra={
                    "channel": "alexa",
                    "error": str(exc),
                    "payload_size": len(raw_body),
                },
            )
            record_inbound_dropped(str(exc))
            return Response(status_code=status.HTTP_200_OK)

        platform_response = await adapter.handle_request(payload)
        if platform_response is None:
            return Response(status_code=status.HTTP_200_OK)

        return JSONResponse(
            content=platform_response.to_payload(),
            status_code=status.HTTP_200_OK,
        )

    for path in ("", "/"):
        router.add_api_route(
            path,
            receive_webhook,
            methods=["GET", "POST"],
            response_model=None,
            include_in_schema=path == "",
        )

    return router

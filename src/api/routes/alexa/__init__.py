"""Rotas do canal Alexa."""

from api.routes.alexa.webhook import create_webhook_router

__all__ = ["create_webhook_router"]

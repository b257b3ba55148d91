"""Casos de uso do canal Alexa."""

from app.use_cases.alexa.send_reply import SendReplyUseCase

__all__ = ["SendReplyUseCase"]

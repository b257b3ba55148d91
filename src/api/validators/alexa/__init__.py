"""Validação de schema para o adapter Alexa.

Uso:
    from api.validators.alexa import AlexaSchemaValidator, ValidationError

    validator = AlexaSchemaValidator()
    command = validator.validate(data, "send")
"""

from api.validators.alexa.schemas import SendObject, SendSchema, SendTarget
from api.validators.alexa.validator import AlexaSchemaValidator, ValidationError

__all__ = [
    "AlexaSchemaValidator",
    "SendObject",
    "SendSchema",
    "SendTarget",
    "ValidationError",
]

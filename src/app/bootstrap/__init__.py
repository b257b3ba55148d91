"""Bootstrap da aplicação — inicialização e wiring.

Composition root: configura logging, valida settings e constrói o adapter.

Uso:
    from app.bootstrap import create_adapter, initialize_app

    initialize_app()
    adapter = create_adapter()
"""

from __future__ import annotations

import logging

from app.bootstrap.adapter_factory import create_adapter
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_alexa_settings, get_base_settings

# Nome do serviço para logs e métricas
SERVICE_NAME = "alexa_adapter"
STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging estruturado com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
        log_format=base.log_format,
    )


def initialize_test_app() -> None:
    """Inicializa logging para testes (DEBUG, texto)."""
    configure_logging(
        level="DEBUG",
        service_name=f"{SERVICE_NAME}_test",
        correlation_id_getter=get_correlation_id,
        log_format="text",
    )


def validate_runtime_settings() -> None:
    """Valida settings no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    base = get_base_settings()
    strict_mode = base.environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"alexa: {error}" for error in get_alexa_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


__all__ = [
    "SERVICE_NAME",
    "create_adapter",
    "initialize_app",
    "initialize_test_app",
    "validate_runtime_settings",
]

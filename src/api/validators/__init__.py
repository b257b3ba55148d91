"""Validators por canal — validação de schema de payloads.

Estrutura:
- alexa/: schemas de envio (send) e de eventos normalizados (inbound)

Cada canal tem seus próprios validators, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []

"""Connectors por canal — parsing da borda HTTP.

Estrutura:
- alexa/webhook/: decodificação do corpo das requisições do Alexa Skills Kit
"""

__all__: list[str] = []

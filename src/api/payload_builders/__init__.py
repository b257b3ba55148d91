"""Payload builders por canal — construção de payloads para APIs externas.

Estrutura:
- alexa/: resposta do Alexa Skills Kit (outputSpeech + card)

Cada canal tem seus próprios builders, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []

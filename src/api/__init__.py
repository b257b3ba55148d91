"""API — camada de borda do canal Alexa.

Responsabilidades:
- Receber requisições do Alexa Skills Kit (webhook)
- Normalizar dados para modelos internos
- Construir a resposta da plataforma
- Validar schemas de envio e de eventos

Subpastas:
- connectors/: parsing do corpo HTTP
- normalizers/: payload externo → InboundEvent
- payload_builders/: OutboundCommand → PlatformResponse
- validators/: validação de schema por operação
- routes/: endpoints HTTP (webhook, health)

NÃO PODE conter: correlação de respostas, orquestração de use cases.
"""

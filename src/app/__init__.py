"""App — orquestração, casos de uso e infraestrutura do adapter.

Subpastas:
- bootstrap/: composition root (factory do adapter, inicialização)
- coordinators/: correlação requisição/resposta e canal de eventos
- use_cases/: casos de uso (envio de resposta)
- infra/: implementações concretas de IO (servidor de webhook próprio)
- protocols/: contratos/interfaces e modelos canônicos
- observability/: correlation_id e métricas via logs estruturados

Padrão: app executa; api adapta; utils apoia.
"""

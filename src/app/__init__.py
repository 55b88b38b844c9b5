"""App: orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- coordinators/: fluxos end-to-end (webhook -> cadastro)
- use_cases/: casos de uso (cadastro inbound, painel admin)
- domain/: telefone, whitelist/vínculo, resultados discriminados
- infra/: implementações concretas de IO (stores, sessão)
- protocols/: contratos/interfaces
- observability/: correlation_id para logs

Padrão: app executa; api adapta; config configura; utils apoia.
"""

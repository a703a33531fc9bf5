"""App - orquestração, casos de uso e wiring.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: modelos de mensagem e envelope
- use_cases/: casos de uso (inputs/outputs, IO via protocolos)
- protocols/: contratos/interfaces
- observability/: correlation_id para logs estruturados

Padrão: app executa; api adapta; config configura.
"""

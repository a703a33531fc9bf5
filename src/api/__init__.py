"""API - camada de borda e adapters de providers externos.

Responsabilidades:
- Construir payloads para APIs externas
- Aplicar validações e limites de API
- Executar IO HTTP e interpretar respostas

Subpastas:
- connectors/: adapters HTTP por provider
- payload_builders/: construção de payloads para APIs externas
- validators/: validação de mensagens e limites

NÃO PODE conter: orquestração de use cases, configuração de logging.
"""

"""Connectors por provider - adapters de borda para APIs externas.

Estrutura:
- mailjet/: Mailjet Send API v3.1

Cada provider tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []

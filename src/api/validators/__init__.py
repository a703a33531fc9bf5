"""Validators por provider - validação de mensagens para APIs externas.

Estrutura:
- mailjet/: Mailjet Send API v3.1
"""

__all__: list[str] = []

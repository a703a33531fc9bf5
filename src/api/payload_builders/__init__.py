"""Payload builders por provider - construção de payloads para APIs externas.

Estrutura:
- mailjet/: Mailjet Send API v3.1

Builders são puros: nunca fazem IO nem alteram a mensagem de entrada.
"""

__all__: list[str] = []

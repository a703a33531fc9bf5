"""Conector Mailjet - adapter de borda para a Send API v3.1.

Este módulo é o único ponto de IO para envio de email.
Responsabilidades:
- HTTP (basic auth) para https://api.mailjet.com/v3.1/send
- Interpretação de respostas e erros da API
- Modelos de resultado (SentMessage)
"""

from .errors import NETWORK_ERROR_MESSAGE, MailjetTransportError
from .models import SentMessage
from .response import interpret_response
from .transport import DEFAULT_HOST, SEND_PATH, MailjetApiTransport

__all__ = [
    "DEFAULT_HOST",
    "NETWORK_ERROR_MESSAGE",
    "SEND_PATH",
    "MailjetApiTransport",
    "MailjetTransportError",
    "SentMessage",
    "interpret_response",
]

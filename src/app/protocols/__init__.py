"""Protocolos e contratos do core da aplicação."""

from .email_transport import EmailTransportProtocol
from .http_client import HttpClientProtocol

__all__ = [
    "EmailTransportProtocol",
    "HttpClientProtocol",
]

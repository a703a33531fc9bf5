"""Builders de payload para a Mailjet Send API v3.1.

Separados por responsabilidade: endereços, anexos, roteamento de headers
e montagem final (factory).
"""

from api.payload_builders.mailjet.factory import build_message, build_payload
from api.payload_builders.mailjet.headers import (
    FORBIDDEN_HEADERS,
    HEADER_TO_FIELD,
    build_header_fields,
    is_reserved_header,
)

__all__ = [
    "FORBIDDEN_HEADERS",
    "HEADER_TO_FIELD",
    "build_header_fields",
    "build_message",
    "build_payload",
    "is_reserved_header",
]

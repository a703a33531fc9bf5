"""Helpers de logging para a API Mailjet (sem PII nem credenciais)."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_request(host: str, recipient_count: int, sandbox: bool) -> None:
    """Loga envio de requisição sem endereços de email."""
    logger.debug(
        "mailjet_request",
        extra={
            "host": host,
            "recipient_count": recipient_count,
            "sandbox": sandbox,
        },
    )


def log_success(host: str, status_code: int, message_id: str) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "mailjet_send_success",
        extra={
            "host": host,
            "status_code": status_code,
            "message_id": message_id,
        },
    )

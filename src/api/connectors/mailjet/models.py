"""Modelos de resultado do conector Mailjet."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from app.domain.email import Email, Envelope


@dataclass(frozen=True)
class SentMessage:
    """Mensagem aceita pela Mailjet.

    Attributes:
        message_id: ID atribuído pela Mailjet ao primeiro destinatário
        original_message: Mensagem enviada
        envelope: Envelope usado na entrega
        debug: Corpo bruto da resposta, para diagnóstico
        response: Resposta HTTP bruta
    """

    message_id: str
    original_message: Email
    envelope: Envelope
    debug: str = ""
    response: httpx.Response | None = field(default=None, repr=False, compare=False)

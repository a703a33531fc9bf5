"""Protocolos de envio de email outbound."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from api.connectors.mailjet.models import SentMessage
    from app.domain.email import Email, Envelope


class EmailTransportProtocol(Protocol):
    """Contrato mínimo para enviar uma mensagem de email."""

    def send(self, email: Email, envelope: Envelope | None = None) -> SentMessage: ...

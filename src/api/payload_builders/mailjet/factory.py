"""Construção do payload completo da Mailjet Send API v3.1."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.mailjet.addresses import (
    format_address,
    format_addresses,
    format_recipients,
)
from api.payload_builders.mailjet.attachments import build_attachments
from api.payload_builders.mailjet.headers import build_header_fields
from api.validators.mailjet.reply_to import validate_reply_to

if TYPE_CHECKING:
    from app.domain.email import Email, Envelope


def build_message(email: Email, envelope: Envelope) -> dict[str, Any]:
    """Constrói o objeto de mensagem (um item de ``Messages``).

    Args:
        email: Mensagem a enviar
        envelope: Remetente e destinatários efetivos

    Returns:
        Objeto de mensagem conforme API Mailjet

    Raises:
        ValidationError: Se a mensagem viola restrições da API
    """
    attachments, inlines = build_attachments(email)

    message: dict[str, Any] = {
        "From": format_address(envelope.sender),
        "To": format_recipients(email, envelope),
    }
    if email.subject is not None:
        message["Subject"] = email.subject
    message["Attachments"] = attachments
    message["InlinedAttachments"] = inlines

    if email.cc:
        message["Cc"] = format_addresses(email.cc)
    if email.bcc:
        message["Bcc"] = format_addresses(email.bcc)

    reply_to = validate_reply_to(email)
    if reply_to is not None:
        message["ReplyTo"] = format_address(reply_to)

    if email.text_body:
        message["TextPart"] = email.text_body
    if email.html_body:
        message["HTMLPart"] = email.html_body

    fields, headers = build_header_fields(email)
    if headers:
        message["Headers"] = headers
    message.update(fields)

    return message


def build_payload(
    email: Email,
    envelope: Envelope,
    *,
    sandbox: bool = False,
) -> dict[str, Any]:
    """Constrói payload completo pronto para serialização JSON.

    Função pura: um payload novo por chamada, sem alterar email/envelope.
    """
    return {
        "Messages": [build_message(email, envelope)],
        "SandBoxMode": sandbox,
    }

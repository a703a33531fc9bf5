"""Factory de wiring para Mailjet (bootstrap)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.mailjet.transport import MailjetApiTransport
from app.use_cases.email.send_email import SendEmailUseCase
from config.settings import get_mailjet_settings

if TYPE_CHECKING:
    from app.protocols.http_client import HttpClientProtocol
    from config.settings.mailjet import MailjetSettings


def create_mailjet_transport(
    settings: MailjetSettings | None = None,
    client: HttpClientProtocol | None = None,
) -> MailjetApiTransport:
    """Cria transporte Mailjet com config padrão.

    Args:
        settings: MailjetSettings opcional. Se None, carrega do ambiente.
        client: Cliente HTTP opcional (ex: httpx.Client com pool próprio).

    Returns:
        Transporte configurado.
    """
    mailjet = settings or get_mailjet_settings()
    return MailjetApiTransport(
        mailjet.public_key,
        mailjet.private_key,
        client,
        sandbox=mailjet.sandbox,
        host=mailjet.host,
        timeout_seconds=mailjet.request_timeout_seconds,
    )


def create_send_email_use_case(
    settings: MailjetSettings | None = None,
    client: HttpClientProtocol | None = None,
) -> SendEmailUseCase:
    """Cria use case de envio com transporte Mailjet injetado."""
    return SendEmailUseCase(transport=create_mailjet_transport(settings, client))

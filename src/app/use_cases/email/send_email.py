"""Use case para envio de email outbound."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from api.connectors.mailjet.errors import MailjetTransportError
from api.validators.mailjet.errors import ValidationError
from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id

if TYPE_CHECKING:
    from app.domain.email import Email, Envelope
    from app.protocols.email_transport import EmailTransportProtocol


@dataclass(frozen=True)
class SendEmailResult:
    """Resultado do envio, sem exceções para o chamador."""

    success: bool
    message_id: str | None = None
    error_code: str | None = None
    error_message: str | None = None
    status_code: int | None = None


class SendEmailUseCase:
    """Orquestra envio via transporte e converte falhas em resultado."""

    def __init__(self, transport: EmailTransportProtocol) -> None:
        self._transport = transport

    def execute(self, email: Email, envelope: Envelope | None = None) -> SendEmailResult:
        """Executa envio com tratamento de erro.

        Gera correlation_id para o envio se o contexto ainda não tiver um.
        """
        token = None if get_correlation_id() else set_correlation_id()
        try:
            return self._send(email, envelope)
        finally:
            if token is not None:
                reset_correlation_id(token)

    def _send(self, email: Email, envelope: Envelope | None) -> SendEmailResult:
        try:
            sent = self._transport.send(email, envelope)
        except ValidationError as exc:
            return SendEmailResult(
                success=False,
                error_code="VALIDATION_ERROR",
                error_message=str(exc),
            )
        except ValueError as exc:
            return SendEmailResult(
                success=False,
                error_code="INVALID_MESSAGE",
                error_message=str(exc),
            )
        except MailjetTransportError as exc:
            return SendEmailResult(
                success=False,
                error_code="TRANSPORT_ERROR",
                error_message=exc.message,
                status_code=exc.status_code,
            )

        return SendEmailResult(success=True, message_id=sent.message_id)

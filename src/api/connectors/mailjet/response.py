"""Interpretação de respostas da Mailjet Send API v3.1.

Converte a resposta HTTP bruta em SentMessage ou MailjetTransportError.
Ordem de classificação:
1. corpo não-JSON
2. status não-2xx (usa Errors[0].ErrorMessage quando disponível)
3. ausência de ``Messages`` como lista não-vazia
4. ``Messages[0].Errors`` preenchido mesmo com 2xx (ErrorMessage ou corpo bruto)
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from api.connectors.mailjet.errors import MailjetTransportError
from api.connectors.mailjet.models import SentMessage

if TYPE_CHECKING:
    import httpx

    from app.domain.email import Email, Envelope


def _is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def _first_message_errors(result: Any) -> list[Any]:
    """Retorna ``Messages[0].Errors`` se for uma lista preenchida."""
    if not isinstance(result, dict):
        return []
    messages = result.get("Messages")
    if not isinstance(messages, list) or not messages or not isinstance(messages[0], dict):
        return []
    errors = messages[0].get("Errors")
    if not isinstance(errors, list):
        return []
    return errors


def _first_error_message(result: Any) -> str | None:
    """Extrai ``Messages[0].Errors[0].ErrorMessage`` se presente."""
    errors = _first_message_errors(result)
    if not errors or not isinstance(errors[0], dict):
        return None
    message = errors[0].get("ErrorMessage")
    return str(message) if message else None


def _extract_message_id(first_message: dict[str, Any]) -> str:
    """Extrai ``To[0].MessageID``; string vazia se ausente."""
    recipients = first_message.get("To")
    if not isinstance(recipients, list) or not recipients or not isinstance(recipients[0], dict):
        return ""
    message_id = recipients[0].get("MessageID")
    return "" if message_id is None else str(message_id)


def _send_error(details: str, status_code: int, response: httpx.Response) -> MailjetTransportError:
    return MailjetTransportError(
        f'Unable to send an email: "{details}" (code {status_code}).',
        response,
    )


def interpret_response(
    response: httpx.Response,
    *,
    email: Email,
    envelope: Envelope,
) -> SentMessage:
    """Interpreta resposta da Mailjet.

    Args:
        response: Resposta HTTP já recebida
        email: Mensagem enviada (anexada ao SentMessage)
        envelope: Envelope usado no envio

    Returns:
        SentMessage com o MessageID atribuído pela Mailjet

    Raises:
        MailjetTransportError: Para qualquer resposta que não seja sucesso
    """
    status_code = response.status_code
    body = response.text

    try:
        result = json.loads(body)
    except ValueError as exc:
        raise _send_error(body, status_code, response) from exc

    if not _is_success(status_code):
        details = _first_error_message(result) or body
        raise _send_error(details, status_code, response)

    messages = result.get("Messages") if isinstance(result, dict) else None
    if not isinstance(messages, list) or not messages:
        raise MailjetTransportError(
            f'Unable to send an email: "{body}" malformed api response.',
            response,
        )

    if _first_message_errors(result):
        details = _first_error_message(result) or body
        raise _send_error(details, status_code, response)

    first_message = messages[0] if isinstance(messages[0], dict) else {}
    return SentMessage(
        message_id=_extract_message_id(first_message),
        original_message=email,
        envelope=envelope,
        debug=body,
        response=response,
    )

"""Validação de Reply-To conforme limites da Send API v3.1."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.validators.mailjet.errors import ValidationError

if TYPE_CHECKING:
    from app.domain.email import Address, Email

MAX_REPLY_TO_ADDRESSES = 1


def validate_reply_to(email: Email) -> Address | None:
    """Valida e retorna o único Reply-To da mensagem.

    Args:
        email: Mensagem a enviar

    Returns:
        Address do Reply-To, ou None se a mensagem não declara nenhum

    Raises:
        ValidationError: Se mais de um Reply-To foi informado
    """
    count = len(email.reply_to)
    if count > MAX_REPLY_TO_ADDRESSES:
        raise ValidationError(
            f"Mailjet's API only supports one Reply-To email, {count} given."
        )
    return email.reply_to[0] if email.reply_to else None

"""Builder de anexos (regulares e inline) para a Send API v3.1."""

from __future__ import annotations

import base64
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.domain.email import Attachment, Email


def _format_attachment(attachment: Attachment) -> dict[str, Any]:
    return {
        "ContentType": attachment.content_type,
        "Filename": attachment.filename,
        "Base64Content": base64.b64encode(attachment.content).decode("ascii"),
    }


def build_attachments(email: Email) -> tuple[list[dict[str, Any]], list[dict[str, Any]]]:
    """Separa anexos da mensagem em Attachments e InlinedAttachments.

    Args:
        email: Mensagem de origem

    Returns:
        (attachments, inlined_attachments), ambos listas (possivelmente vazias)
    """
    attachments: list[dict[str, Any]] = []
    inlines: list[dict[str, Any]] = []

    for attachment in email.attachments:
        formatted = _format_attachment(attachment)
        if attachment.inline:
            formatted["ContentID"] = attachment.reference_id
            inlines.append(formatted)
        else:
            attachments.append(formatted)

    return attachments, inlines

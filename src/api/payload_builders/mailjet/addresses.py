"""Formatação de endereços no formato da Send API v3.1."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable

    from app.domain.email import Address, Email, Envelope


def format_address(address: Address) -> dict[str, Any]:
    """Converte Address em ``{"Email", "Name"}``."""
    return {
        "Email": address.email,
        "Name": address.name,
    }


def format_addresses(addresses: Iterable[Address]) -> list[dict[str, Any]]:
    """Converte lista de Address preservando a ordem."""
    return [format_address(address) for address in addresses]


def format_recipients(email: Email, envelope: Envelope) -> list[dict[str, Any]]:
    """Monta o campo To a partir dos destinatários do envelope.

    Endereços que já aparecem em Cc/Bcc da mensagem vão nesses campos,
    não em To. O nome de exibição do destinatário é sempre descartado.
    """
    copied = {address.email.lower() for address in (*email.cc, *email.bcc)}
    return [
        {"Email": recipient.email, "Name": ""}
        for recipient in envelope.recipients
        if recipient.email.lower() not in copied
    ]

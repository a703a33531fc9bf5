"""Roteamento de headers da mensagem para o payload Mailjet.

Headers reservados (X-MJ-*, X-Mailjet-*) não são repassados como headers
genéricos: cada um vira um campo dedicado do payload, com conversão de
tipo definida na tabela ``HEADER_TO_FIELD``. Headers que a Mailjet gera
por conta própria (``FORBIDDEN_HEADERS``) são descartados.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from api.validators.mailjet.errors import HeaderValueError

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.domain.email import Email

    HeaderCaster = Callable[[str, str], Any]

_TRUE_VALUES = frozenset({"1", "true", "on", "yes"})


def cast_string(header_name: str, value: str) -> str:
    """Repassa o valor sem conversão."""
    return value


def cast_bool(header_name: str, value: str) -> bool:
    """Converte valor textual em booleano.

    ``1``/``true``/``on``/``yes`` (case-insensitive) são verdadeiros;
    qualquer outro valor é falso.
    """
    return value.strip().lower() in _TRUE_VALUES


def cast_int(header_name: str, value: str) -> int:
    """Converte valor em inteiro base 10.

    Raises:
        HeaderValueError: Se o valor não é um inteiro
    """
    try:
        return int(value.strip(), 10)
    except ValueError as exc:
        raise HeaderValueError(header_name, value, "an integer") from exc


def cast_json(header_name: str, value: str) -> dict[str, Any]:
    """Decodifica valor como objeto JSON.

    Raises:
        HeaderValueError: Se o valor não é JSON válido ou não é um objeto
    """
    try:
        decoded = json.loads(value)
    except json.JSONDecodeError as exc:
        raise HeaderValueError(header_name, value, "a JSON object") from exc

    if not isinstance(decoded, dict):
        raise HeaderValueError(header_name, value, "a JSON object")
    return decoded


# Nome do header (lowercase) -> (campo do payload, conversor)
HEADER_TO_FIELD: dict[str, tuple[str, HeaderCaster]] = {
    "x-mj-templatelanguage": ("TemplateLanguage", cast_bool),
    "x-mj-templateid": ("TemplateID", cast_int),
    "x-mj-templateerrorreporting": ("TemplateErrorReporting", cast_json),
    "x-mj-templateerrordeliver": ("TemplateErrorDeliver", cast_bool),
    "x-mj-vars": ("Variables", cast_json),
    "x-mj-customid": ("CustomID", cast_string),
    "x-mj-eventpayload": ("EventPayload", cast_string),
    "x-mailjet-campaign": ("CustomCampaign", cast_string),
    "x-mailjet-deduplicatecampaign": ("DeduplicateCampaign", cast_bool),
    "x-mailjet-prio": ("Priority", cast_int),
    "x-mailjet-trackclick": ("TrackClick", cast_string),
    "x-mailjet-trackopen": ("TrackOpen", cast_string),
}

# Headers gerados pela própria Mailjet ou mapeados para campos de topo
FORBIDDEN_HEADERS = frozenset(
    {
        "date",
        "x-csa-complaints",
        "message-id",
        "x-mj-statisticscontactslistid",
        "domainkey-status",
        "received-spf",
        "authentication-results",
        "received",
        "from",
        "sender",
        "subject",
        "to",
        "cc",
        "bcc",
        "reply-to",
        "return-path",
        "delivered-to",
        "dkim-signature",
        "x-feedback-id",
        "x-mailjet-segmentation",
        "list-id",
        "x-mj-mid",
        "x-mj-errormessage",
        "x-mailer",
        "x-mj-smtpmessageid",
        "mime-version",
        "content-type",
        "content-transfer-encoding",
    }
)


def is_reserved_header(name: str) -> bool:
    """Retorna True se o header tem campo dedicado no payload."""
    return name.lower() in HEADER_TO_FIELD


def build_header_fields(email: Email) -> tuple[dict[str, Any], dict[str, str]]:
    """Separa headers da mensagem em campos dedicados e headers genéricos.

    Args:
        email: Mensagem de origem

    Returns:
        (campos dedicados, headers genéricos). Nomes de headers genéricos
        são preservados como informados.

    Raises:
        HeaderValueError: Se um header reservado tem valor inválido
    """
    fields: dict[str, Any] = {}
    headers: dict[str, str] = {}

    for name, value in email.headers:
        key = name.lower()
        route = HEADER_TO_FIELD.get(key)
        if route is not None:
            field_name, caster = route
            fields[field_name] = caster(name, value)
            continue
        if key in FORBIDDEN_HEADERS:
            continue
        headers[name] = value

    return fields, headers

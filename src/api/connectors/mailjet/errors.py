"""Erros de transporte da Mailjet Send API."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

NETWORK_ERROR_MESSAGE = "Could not reach the remote server."


class MailjetTransportError(Exception):
    """Falha de envio: rede, resposta mal-formada ou erro da API.

    Sempre carrega a resposta bruta (quando houve resposta) para que o
    chamador decida sobre retry/alerta. Nunca é retentado internamente.
    """

    def __init__(self, message: str, response: httpx.Response | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.response = response

    @property
    def status_code(self) -> int | None:
        """Status HTTP da resposta, ou None se o servidor não respondeu."""
        return self.response.status_code if self.response is not None else None

    @property
    def body(self) -> str | None:
        """Corpo bruto da resposta, ou None se o servidor não respondeu."""
        return self.response.text if self.response is not None else None

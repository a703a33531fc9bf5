"""Transporte de email via Mailjet Send API v3.1.

Responsabilidades:
- Montar o payload (api.payload_builders.mailjet)
- POST autenticado (basic auth com API key pública/privada)
- Interpretar a resposta (api.connectors.mailjet.response)

Exatamente uma requisição HTTP por envio: sem retry, cache ou fila.
Política de timeout/retry/pool pertence ao httpx.Client injetado.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx

from api.connectors.mailjet.errors import NETWORK_ERROR_MESSAGE, MailjetTransportError
from api.connectors.mailjet.mailjet_logging import log_request, log_success
from api.connectors.mailjet.response import interpret_response
from api.payload_builders.mailjet import build_payload
from app.domain.email import Envelope

if TYPE_CHECKING:
    from api.connectors.mailjet.models import SentMessage
    from app.domain.email import Email
    from app.protocols.http_client import HttpClientProtocol

DEFAULT_HOST = "api.mailjet.com"
SEND_PATH = "/v3.1/send"


class MailjetApiTransport:
    """Envia emails pela Mailjet Send API v3.1.

    Args:
        public_key: API key pública (usuário do basic auth)
        private_key: API key privada (senha do basic auth)
        client: Cliente HTTP injetado; se None, cria um httpx.Client próprio
        sandbox: Ativa SandBoxMode (a API valida sem entregar)
        host: Host da API (default api.mailjet.com)
        timeout_seconds: Timeout do cliente próprio (ignorado se client injetado)
    """

    def __init__(
        self,
        public_key: str,
        private_key: str,
        client: HttpClientProtocol | None = None,
        *,
        sandbox: bool = False,
        host: str | None = None,
        timeout_seconds: float = 30.0,
    ) -> None:
        self._public_key = public_key
        self._private_key = private_key
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=timeout_seconds)
        self._sandbox = sandbox
        self._host = host or DEFAULT_HOST

    @property
    def host(self) -> str:
        return self._host

    @property
    def sandbox(self) -> bool:
        return self._sandbox

    @property
    def endpoint(self) -> str:
        """URL completa do endpoint de envio."""
        return f"https://{self._host}{SEND_PATH}"

    def set_host(self, host: str | None) -> MailjetApiTransport:
        """Sobrescreve o host da API (None volta ao default)."""
        self._host = host or DEFAULT_HOST
        return self

    def __str__(self) -> str:
        suffix = "?sandbox=true" if self._sandbox else ""
        return f"mailjet+api://{self._host}{suffix}"

    def __repr__(self) -> str:
        return f"MailjetApiTransport({str(self)!r})"

    def get_payload(self, email: Email, envelope: Envelope) -> dict[str, Any]:
        """Payload que seria enviado para (email, envelope)."""
        return build_payload(email, envelope, sandbox=self._sandbox)

    def send(self, email: Email, envelope: Envelope | None = None) -> SentMessage:
        """Envia a mensagem.

        Args:
            email: Mensagem a enviar
            envelope: Envelope de entrega; derivado da mensagem se None

        Returns:
            SentMessage com o MessageID da Mailjet

        Raises:
            ValidationError: Se a mensagem viola restrições da API (antes de IO)
            MailjetTransportError: Se a rede falhou ou a API recusou o envio
        """
        if envelope is None:
            envelope = Envelope.from_email(email)
        payload = self.get_payload(email, envelope)

        log_request(self._host, len(envelope.recipients), self._sandbox)
        response = self._post(payload)

        sent = interpret_response(response, email=email, envelope=envelope)
        log_success(self._host, response.status_code, sent.message_id)
        return sent

    def _post(self, payload: dict[str, Any]) -> httpx.Response:
        """Executa o POST; falha de rede vira MailjetTransportError."""
        try:
            return self._client.post(
                self.endpoint,
                json=payload,
                headers={"Accept": "application/json"},
                auth=(self._public_key, self._private_key),
            )
        except httpx.RequestError as exc:
            raise MailjetTransportError(NETWORK_ERROR_MESSAGE) from exc

    def close(self) -> None:
        """Fecha o cliente HTTP se ele foi criado por este transporte."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> MailjetApiTransport:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

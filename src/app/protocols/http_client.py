"""Protocolos HTTP usados pelo app.

Evita dependência direta de uma implementação de cliente.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    import httpx


class HttpClientProtocol(Protocol):
    """Contrato mínimo do cliente HTTP injetado no transporte (httpx.Client)."""

    def post(
        self,
        url: str,
        *,
        json: Any = None,
        headers: dict[str, str] | None = None,
        auth: tuple[str, str] | None = None,
    ) -> httpx.Response: ...

    def close(self) -> None: ...

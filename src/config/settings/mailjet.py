"""Settings específicas de Mailjet.

Configurações do canal Email via Mailjet Send API v3.1.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

# Constantes da Send API
MAILJET_DEFAULT_HOST: str = "api.mailjet.com"

_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class MailjetSettings:
    """Configurações do canal Mailjet.

    Attributes:
        public_key: API key pública (usuário do basic auth)
        private_key: API key privada (senha do basic auth)
        host: Host da API (sem esquema)
        sandbox: Ativa SandBoxMode (valida sem entregar)
        request_timeout_seconds: Timeout para requisições HTTP
    """

    # Credenciais (carregadas de env ou Secret Manager)
    public_key: str = ""
    private_key: str = field(default="", repr=False)

    # API
    host: str = MAILJET_DEFAULT_HOST
    sandbox: bool = False

    # Timeouts
    request_timeout_seconds: float = 30.0

    def validate(self) -> list[str]:
        """Valida configurações mínimas de Mailjet.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.public_key:
            errors.append("MAILJET_API_KEY não configurado")

        if not self.private_key:
            errors.append("MAILJET_SECRET_KEY não configurado")

        if not self.host or "://" in self.host or "/" in self.host:
            errors.append("MAILJET_HOST deve ser apenas o host (ex: api.mailjet.com)")

        if self.request_timeout_seconds <= 0:
            errors.append("MAILJET_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> MailjetSettings:
    """Carrega MailjetSettings a partir de variáveis de ambiente."""
    return MailjetSettings(
        public_key=os.getenv("MAILJET_API_KEY", ""),
        private_key=os.getenv("MAILJET_SECRET_KEY", ""),
        host=os.getenv("MAILJET_HOST", MAILJET_DEFAULT_HOST) or MAILJET_DEFAULT_HOST,
        sandbox=os.getenv("MAILJET_SANDBOX", "false").strip().lower() in _TRUE_VALUES,
        request_timeout_seconds=float(
            os.getenv("MAILJET_REQUEST_TIMEOUT_SECONDS", "30")
        ),
    )


@lru_cache(maxsize=1)
def get_mailjet_settings() -> MailjetSettings:
    """Retorna instância cacheada de MailjetSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()

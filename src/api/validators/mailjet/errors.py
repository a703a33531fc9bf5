"""Erros de validação para mensagens enviadas via Mailjet."""

from __future__ import annotations


class ValidationError(Exception):
    """Mensagem viola uma restrição da API Mailjet.

    Levantado antes de qualquer chamada de rede; nunca é retentável.
    """


class HeaderValueError(ValidationError):
    """Valor de header reservado não pôde ser convertido para o campo do payload."""

    def __init__(self, header_name: str, value: str, expected: str) -> None:
        super().__init__(
            f'Invalid value "{value}" for header "{header_name}": expected {expected}.'
        )
        self.header_name = header_name
        self.value = value
        self.expected = expected

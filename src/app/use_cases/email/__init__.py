"""Use cases de email."""

from .send_email import SendEmailResult, SendEmailUseCase

__all__ = [
    "SendEmailResult",
    "SendEmailUseCase",
]

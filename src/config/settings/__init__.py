"""Agregador de settings do Pyloto Mailer.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Channel-specific settings
from config.settings.mailjet import (
    MAILJET_DEFAULT_HOST,
    MailjetSettings,
    get_mailjet_settings,
)

__all__ = [
    # Constants
    "MAILJET_DEFAULT_HOST",
    # Channels
    "MailjetSettings",
    "get_mailjet_settings",
]

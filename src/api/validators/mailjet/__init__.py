"""Validadores de conformidade para mensagens enviadas via Mailjet.

Uso:
    from api.validators.mailjet import ValidationError, validate_reply_to

    reply_to = validate_reply_to(email)
"""

from api.validators.mailjet.errors import HeaderValueError, ValidationError
from api.validators.mailjet.reply_to import MAX_REPLY_TO_ADDRESSES, validate_reply_to

__all__ = [
    "MAX_REPLY_TO_ADDRESSES",
    "HeaderValueError",
    "ValidationError",
    "validate_reply_to",
]

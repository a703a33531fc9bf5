"""Modelos de dominio para mensagens de email outbound.

Representam a mensagem (conteudo, cabecalhos, anexos) e o envelope de
entrega de forma independente do provider. Os builders da camada api/
apenas leem estes modelos; nunca os alteram.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Address(BaseModel):
    """Endereco de email com nome de exibicao opcional."""

    model_config = ConfigDict(frozen=True)

    email: str = Field(..., min_length=1, description="Endereco de email.")
    name: str = Field(default="", description="Nome de exibicao (pode ser vazio).")

    @field_validator("email")
    @classmethod
    def _strip_email(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("email nao pode ser vazio")
        return value

    @classmethod
    def create(cls, value: Address | str) -> Address:
        """Aceita Address pronto ou email simples."""
        if isinstance(value, Address):
            return value
        return cls(email=value)

    def without_name(self) -> Address:
        """Copia do endereco sem nome de exibicao."""
        return Address(email=self.email)


class Attachment(BaseModel):
    """Anexo binario de uma mensagem.

    Anexos inline sao referenciados no HTML via ``cid:<content_id>``;
    quando content_id nao e informado, o filename e usado.
    """

    model_config = ConfigDict(frozen=True)

    filename: str = Field(..., min_length=1)
    content: bytes = Field(default=b"")
    content_type: str = Field(default="application/octet-stream")
    inline: bool = Field(default=False)
    content_id: str | None = Field(default=None)

    @property
    def reference_id(self) -> str:
        """Identificador usado para referenciar o anexo inline."""
        return self.content_id or self.filename


class Email(BaseModel):
    """Mensagem de email a ser enviada.

    ``headers`` preserva a ordem de insercao; nomes sao comparados sem
    diferenciar maiusculas/minusculas.
    """

    model_config = ConfigDict(frozen=True)

    subject: str | None = None
    text_body: str | None = None
    html_body: str | None = None

    sender: Address | None = None
    from_addresses: tuple[Address, ...] = Field(default=())
    to: tuple[Address, ...] = Field(default=())
    cc: tuple[Address, ...] = Field(default=())
    bcc: tuple[Address, ...] = Field(default=())
    reply_to: tuple[Address, ...] = Field(default=())

    headers: tuple[tuple[str, str], ...] = Field(default=())
    attachments: tuple[Attachment, ...] = Field(default=())

    @field_validator("from_addresses", "to", "cc", "bcc", "reply_to", mode="before")
    @classmethod
    def _coerce_addresses(cls, value: object) -> object:
        if isinstance(value, (Address, str)):
            value = [value]
        if isinstance(value, (list, tuple)):
            return tuple(Address.create(item) for item in value)
        return value

    @field_validator("sender", mode="before")
    @classmethod
    def _coerce_sender(cls, value: object) -> object:
        if isinstance(value, str):
            return Address(email=value)
        return value

    @property
    def inline_attachments(self) -> tuple[Attachment, ...]:
        """Anexos marcados como inline."""
        return tuple(a for a in self.attachments if a.inline)

    def get_header(self, name: str) -> str | None:
        """Retorna o primeiro valor do header (case-insensitive)."""
        wanted = name.lower()
        for header_name, value in self.headers:
            if header_name.lower() == wanted:
                return value
        return None

    def with_header(self, name: str, value: str) -> Email:
        """Retorna copia da mensagem com um header adicional."""
        return self.model_copy(update={"headers": (*self.headers, (name, str(value)))})


class Envelope(BaseModel):
    """Remetente e destinatarios efetivos da entrega.

    Pode diferir dos headers From/To visiveis na mensagem.
    """

    model_config = ConfigDict(frozen=True)

    sender: Address
    recipients: tuple[Address, ...]

    @field_validator("sender", mode="before")
    @classmethod
    def _coerce_sender(cls, value: object) -> object:
        if isinstance(value, str):
            return Address(email=value)
        return value

    @field_validator("recipients", mode="before")
    @classmethod
    def _coerce_recipients(cls, value: object) -> object:
        if isinstance(value, (Address, str)):
            value = [value]
        if isinstance(value, (list, tuple)):
            return tuple(Address.create(item) for item in value)
        return value

    @field_validator("recipients")
    @classmethod
    def _require_recipients(cls, value: tuple[Address, ...]) -> tuple[Address, ...]:
        if not value:
            raise ValueError("envelope precisa de pelo menos um destinatario")
        return value

    @classmethod
    def from_email(cls, email: Email) -> Envelope:
        """Deriva envelope dos headers da mensagem.

        Remetente: ``sender`` ou primeiro From.
        Destinatarios: To + Cc + Bcc, sem nome de exibicao.

        Raises:
            ValueError: Se a mensagem nao tem remetente ou destinatarios.
        """
        sender = email.sender or (email.from_addresses[0] if email.from_addresses else None)
        if sender is None:
            raise ValueError("mensagem sem remetente: informe sender ou From")

        recipients = tuple(
            address.without_name() for address in (*email.to, *email.cc, *email.bcc)
        )
        if not recipients:
            raise ValueError("mensagem sem destinatarios: informe To, Cc ou Bcc")

        return cls(sender=sender, recipients=recipients)


__all__ = ["Address", "Attachment", "Email", "Envelope"]

"""Contrato de envio de e-mail para o operador."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class MailAttachment:
    """Anexo binário do e-mail."""

    filename: str
    content: bytes
    content_type: str = "application/octet-stream"


@dataclass(frozen=True, slots=True)
class MailMessage:
    """Mensagem pronta para envio (texto puro + anexos)."""

    sender: str
    to: str
    subject: str
    text: str
    reply_to: str | None = None
    attachments: tuple[MailAttachment, ...] = field(default_factory=tuple)


@runtime_checkable
class MailSenderProtocol(Protocol):
    """Transporte de e-mail. Levanta exceção em falha de entrega."""

    async def send(self, message: MailMessage) -> None: ...

"""Envio de e-mail via SMTP (STARTTLS quando oferecido pelo servidor).

smtplib é bloqueante: cada envio roda em thread via asyncio.to_thread.
O timeout de socket limita conexão, saudação e cada comando SMTP, então
uma task de notificação nunca fica presa indefinidamente.
"""

from __future__ import annotations

import asyncio
import logging
import smtplib
from email.message import EmailMessage
from typing import TYPE_CHECKING

from app.protocols.mail_sender import MailMessage, MailSenderProtocol
from utils.errors import MailDeliveryError

if TYPE_CHECKING:
    from config.settings.email import EmailSettings

logger = logging.getLogger(__name__)


def build_email_message(message: MailMessage) -> EmailMessage:
    """Converte MailMessage em EmailMessage (texto puro + anexos)."""
    email = EmailMessage()
    email["From"] = message.sender
    email["To"] = message.to
    if message.reply_to:
        email["Reply-To"] = message.reply_to
    email["Subject"] = message.subject
    email.set_content(message.text)
    for attachment in message.attachments:
        maintype, _, subtype = attachment.content_type.partition("/")
        email.add_attachment(
            attachment.content,
            maintype=maintype,
            subtype=subtype or "octet-stream",
            filename=attachment.filename,
        )
    return email


class SmtpMailSender(MailSenderProtocol):
    """Transporte SMTP configurado por EmailSettings."""

    def __init__(
        self,
        *,
        host: str,
        port: int = 587,
        username: str = "",
        password: str = "",
        timeout_seconds: float = 10.0,
    ) -> None:
        self._host = host
        self._port = port
        self._username = username
        self._password = password
        self._timeout_seconds = timeout_seconds

    @classmethod
    def from_settings(cls, settings: EmailSettings) -> SmtpMailSender:
        return cls(
            host=settings.smtp_host,
            port=settings.smtp_port,
            username=settings.smtp_username,
            password=settings.smtp_password,
            timeout_seconds=settings.timeout_seconds,
        )

    async def send(self, message: MailMessage) -> None:
        email = build_email_message(message)
        try:
            await asyncio.to_thread(self._send_sync, email)
        except (smtplib.SMTPException, OSError) as exc:
            raise MailDeliveryError(f"Falha SMTP: {exc}") from exc

    def _send_sync(self, email: EmailMessage) -> None:
        with smtplib.SMTP(self._host, self._port, timeout=self._timeout_seconds) as smtp:
            smtp.ehlo()
            if smtp.has_extn("starttls"):
                smtp.starttls()
                smtp.ehlo()
            if self._username:
                smtp.login(self._username, self._password)
            smtp.send_message(email)

"""Testes do transporte SMTP de notificação."""

from __future__ import annotations

import smtplib
from email.message import EmailMessage

import pytest

from app.infra.mail import smtp_mail_sender
from app.infra.mail.smtp_mail_sender import SmtpMailSender, build_email_message
from app.protocols.mail_sender import MailAttachment, MailMessage
from config.settings.email import EmailSettings
from utils.errors import MailDeliveryError


def _message() -> MailMessage:
    return MailMessage(
        sender="loja@example.com",
        to="ops@example.com",
        reply_to="cliente@example.com",
        subject="NOVO PEDIDO abc - RJ - Maria",
        text="NOVO PEDIDO\n",
        attachments=(
            MailAttachment(
                filename="pedido-abc.json",
                content=b'{"pedidoId": "abc"}',
                content_type="application/json",
            ),
        ),
    )


class _FakeSMTP:
    instances: list[_FakeSMTP] = []

    def __init__(self, host: str, port: int, timeout: float) -> None:
        self.host = host
        self.port = port
        self.timeout = timeout
        self.extensions = {"starttls"}
        self.actions: list[str] = []
        self.sent: list[EmailMessage] = []
        _FakeSMTP.instances.append(self)

    def __enter__(self) -> _FakeSMTP:
        return self

    def __exit__(self, *exc: object) -> None:
        self.actions.append("quit")

    def ehlo(self) -> None:
        self.actions.append("ehlo")

    def has_extn(self, name: str) -> bool:
        return name in self.extensions

    def starttls(self) -> None:
        self.actions.append("starttls")

    def login(self, username: str, password: str) -> None:
        self.actions.append(f"login:{username}")

    def send_message(self, message: EmailMessage) -> None:
        self.actions.append("send")
        self.sent.append(message)


@pytest.fixture
def fake_smtp(monkeypatch: pytest.MonkeyPatch) -> type[_FakeSMTP]:
    _FakeSMTP.instances = []
    monkeypatch.setattr(smtp_mail_sender.smtplib, "SMTP", _FakeSMTP)
    return _FakeSMTP


def test_build_email_message_sets_headers_and_attachment() -> None:
    email = build_email_message(_message())

    assert email["From"] == "loja@example.com"
    assert email["To"] == "ops@example.com"
    assert email["Reply-To"] == "cliente@example.com"
    assert email["Subject"] == "NOVO PEDIDO abc - RJ - Maria"
    (attachment,) = list(email.iter_attachments())
    assert attachment.get_filename() == "pedido-abc.json"
    assert attachment.get_content_type() == "application/json"
    assert attachment.get_content() == b'{"pedidoId": "abc"}'


def test_build_email_message_without_reply_to() -> None:
    message = _message()
    email = build_email_message(
        MailMessage(sender=message.sender, to=message.to, subject="s", text="t")
    )
    assert email["Reply-To"] is None
    assert list(email.iter_attachments()) == []


@pytest.mark.asyncio
async def test_send_uses_starttls_and_login(fake_smtp: type[_FakeSMTP]) -> None:
    sender = SmtpMailSender(
        host="smtp.example.com",
        port=2525,
        username="user",
        password="secret",
        timeout_seconds=5.0,
    )

    await sender.send(_message())

    (smtp,) = fake_smtp.instances
    assert (smtp.host, smtp.port, smtp.timeout) == ("smtp.example.com", 2525, 5.0)
    assert smtp.actions == ["ehlo", "starttls", "ehlo", "login:user", "send", "quit"]
    assert smtp.sent[0]["Subject"] == "NOVO PEDIDO abc - RJ - Maria"


@pytest.mark.asyncio
async def test_send_without_credentials_skips_login(fake_smtp: type[_FakeSMTP]) -> None:
    sender = SmtpMailSender.from_settings(EmailSettings(smtp_host="localhost", smtp_port=25))

    await sender.send(_message())

    assert "login:" not in " ".join(fake_smtp.instances[0].actions)


@pytest.mark.asyncio
async def test_smtp_failure_becomes_mail_delivery_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def _refuse(*args: object, **kwargs: object) -> None:
        raise ConnectionRefusedError("connection refused")

    monkeypatch.setattr(smtp_mail_sender.smtplib, "SMTP", _refuse)

    with pytest.raises(MailDeliveryError, match="Falha SMTP"):
        await SmtpMailSender(host="smtp.invalid").send(_message())


@pytest.mark.asyncio
async def test_smtp_protocol_error_becomes_mail_delivery_error(
    fake_smtp: type[_FakeSMTP], monkeypatch: pytest.MonkeyPatch
) -> None:
    def _reject(self: _FakeSMTP, message: EmailMessage) -> None:
        raise smtplib.SMTPRecipientsRefused({"ops@example.com": (550, b"no such user")})

    monkeypatch.setattr(_FakeSMTP, "send_message", _reject)

    with pytest.raises(MailDeliveryError):
        await SmtpMailSender(host="smtp.example.com").send(_message())

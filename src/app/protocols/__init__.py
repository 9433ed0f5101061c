"""Protocolos e contratos do core da aplicação."""

from .backup_sink import BackupSinkProtocol
from .mail_sender import MailAttachment, MailMessage, MailSenderProtocol
from .sheet_sink import SheetCell, SheetSinkProtocol

__all__ = [
    "BackupSinkProtocol",
    "MailAttachment",
    "MailMessage",
    "MailSenderProtocol",
    "SheetCell",
    "SheetSinkProtocol",
]

"""Transporte de e-mail."""

from app.infra.mail.smtp_mail_sender import SmtpMailSender, build_email_message

__all__ = ["SmtpMailSender", "build_email_message"]

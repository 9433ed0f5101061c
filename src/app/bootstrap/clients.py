"""Factories de clientes externos: Google Sheets e SMTP.

Clientes são singletons de processo: seguros para uso concorrente porque
cada chamada é autocontida (append atômico no servidor, conexão SMTP
própria por envio).
"""

from __future__ import annotations

import logging
from functools import lru_cache

from app.infra.mail import SmtpMailSender
from app.infra.sheets import GoogleSheetsClient
from config.settings import get_email_settings, get_google_sheets_settings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def create_sheets_client() -> GoogleSheetsClient:
    """Cria client do Google Sheets (singleton).

    Raises:
        ValueError: Se credenciais ou ID da planilha não configurados
    """
    settings = get_google_sheets_settings()
    errors = settings.validate()
    if errors:
        msg = "; ".join(errors)
        raise ValueError(msg)

    client = GoogleSheetsClient(
        spreadsheet_id=settings.spreadsheet_id,
        sheet_name=settings.sheet_name,
        credentials_json=settings.credentials_json,
    )
    logger.info("google_sheets_client_created", extra={"sheet_name": settings.sheet_name})
    return client


@lru_cache(maxsize=1)
def create_mail_sender() -> SmtpMailSender:
    """Cria transporte SMTP (singleton).

    Sem SMTP_HOST o sender é criado mesmo assim: cada envio falha e é
    logado pela task de notificação, sem afetar o pedido.
    """
    settings = get_email_settings()
    if not settings.enabled:
        logger.warning(
            "smtp_not_configured",
            extra={"component": "bootstrap", "errors": settings.validate()},
        )
    return SmtpMailSender.from_settings(settings)

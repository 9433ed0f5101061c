"""Settings de e-mail (SMTP) para notificação de novos pedidos."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class EmailSettings:
    """Configurações do transporte SMTP.

    Attributes:
        smtp_host: Host do servidor SMTP
        smtp_port: Porta do servidor SMTP (587 = submission com STARTTLS)
        smtp_username: Usuário SMTP (vazio = sem autenticação)
        smtp_password: Senha SMTP
        timeout_seconds: Timeout de conexão/saudação/socket
        mail_from: Remetente dos e-mails de pedido
        mail_to: Caixa do operador que recebe os pedidos
    """

    smtp_host: str = ""
    smtp_port: int = 587
    smtp_username: str = ""
    smtp_password: str = ""
    timeout_seconds: float = 10.0
    mail_from: str = ""
    mail_to: str = ""

    @property
    def enabled(self) -> bool:
        return bool(self.smtp_host and self.mail_to)

    def validate(self) -> list[str]:
        """Valida configurações mínimas de e-mail."""
        errors: list[str] = []
        if not self.smtp_host:
            errors.append("SMTP_HOST não configurado")
        if not self.mail_from:
            errors.append("MAIL_FROM não configurado")
        if not self.mail_to:
            errors.append("MAIL_TO não configurado")
        if self.timeout_seconds <= 0:
            errors.append("SMTP_TIMEOUT_SECONDS deve ser > 0")
        return errors


def _load_email_from_env() -> EmailSettings:
    """Carrega EmailSettings de variáveis de ambiente."""
    return EmailSettings(
        smtp_host=os.getenv("SMTP_HOST", ""),
        smtp_port=int(os.getenv("SMTP_PORT", "587")),
        smtp_username=os.getenv("SMTP_USER", ""),
        smtp_password=os.getenv("SMTP_PASS", ""),
        timeout_seconds=float(os.getenv("SMTP_TIMEOUT_SECONDS", "10")),
        mail_from=os.getenv("MAIL_FROM", ""),
        mail_to=os.getenv("MAIL_TO", ""),
    )


@lru_cache(maxsize=1)
def get_email_settings() -> EmailSettings:
    """Retorna instância cacheada de EmailSettings."""
    return _load_email_from_env()

"""Agregador de settings do serviço de pedidos.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.email import EmailSettings, get_email_settings
from config.settings.google_sheets import (
    DEFAULT_SHEET_NAME,
    GoogleSheetsSettings,
    get_google_sheets_settings,
)
from config.settings.pedidos import PedidoSettings, get_pedido_settings

__all__ = [
    "DEFAULT_SHEET_NAME",
    "BaseSettings",
    "EmailSettings",
    "Environment",
    "GoogleSheetsSettings",
    "PedidoSettings",
    "get_base_settings",
    "get_email_settings",
    "get_google_sheets_settings",
    "get_pedido_settings",
]

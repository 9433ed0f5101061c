"""Settings da planilha de pedidos (Google Sheets via service account)."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_SHEET_NAME = "Pedidos"


@dataclass(frozen=True)
class GoogleSheetsSettings:
    """Configurações do Google Sheets.

    Attributes:
        credentials_json: JSON da service account (conteúdo, não caminho)
        spreadsheet_id: ID da planilha
        sheet_name: Aba onde as linhas são anexadas
    """

    credentials_json: str = ""
    spreadsheet_id: str = ""
    sheet_name: str = DEFAULT_SHEET_NAME

    def validate(self) -> list[str]:
        errors: list[str] = []
        if not self.credentials_json:
            errors.append("GOOGLE_SERVICE_ACCOUNT_JSON não configurado")
        else:
            try:
                json.loads(self.credentials_json)
            except ValueError:
                errors.append("GOOGLE_SERVICE_ACCOUNT_JSON não é JSON válido")
        if not self.spreadsheet_id:
            errors.append("GOOGLE_SHEET_ID não configurado")
        if not self.sheet_name:
            errors.append("GOOGLE_SHEET_NAME não pode ser vazio")
        return errors


def _load_google_sheets_from_env() -> GoogleSheetsSettings:
    """Carrega GoogleSheetsSettings de variáveis de ambiente."""
    return GoogleSheetsSettings(
        credentials_json=os.getenv("GOOGLE_SERVICE_ACCOUNT_JSON", ""),
        spreadsheet_id=os.getenv("GOOGLE_SHEET_ID", ""),
        sheet_name=os.getenv("GOOGLE_SHEET_NAME", DEFAULT_SHEET_NAME),
    )


@lru_cache(maxsize=1)
def get_google_sheets_settings() -> GoogleSheetsSettings:
    """Retorna instância cacheada de GoogleSheetsSettings."""
    return _load_google_sheets_from_env()

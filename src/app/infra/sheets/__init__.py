"""Planilha de pedidos (Google Sheets)."""

from app.infra.sheets.google_sheets_client import GoogleSheetsClient

__all__ = ["GoogleSheetsClient"]

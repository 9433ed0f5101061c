"""Client concreto da planilha de pedidos (Google Sheets API v4)."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import TYPE_CHECKING, Any

from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from app.observability import get_correlation_id
from app.protocols.sheet_sink import SheetSinkProtocol
from utils.errors import SheetAppendError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.protocols.sheet_sink import SheetCell

logger = logging.getLogger(__name__)

_COMPONENT = "google_sheets_client"
_SHEETS_SCOPE = "https://www.googleapis.com/auth/spreadsheets"


def http_status(exc: HttpError) -> int | None:
    status = getattr(getattr(exc, "resp", None), "status", None)
    try:
        return int(status) if status is not None else None
    except (TypeError, ValueError):
        return None


class GoogleSheetsClient(SheetSinkProtocol):
    """Anexa linhas de pedido na aba configurada da planilha."""

    __slots__ = ("_service", "_sheet_name", "_spreadsheet_id")

    def __init__(self, *, spreadsheet_id: str, sheet_name: str, credentials_json: str) -> None:
        credentials = service_account.Credentials.from_service_account_info(
            json.loads(credentials_json),
            scopes=[_SHEETS_SCOPE],
        )
        self._spreadsheet_id = spreadsheet_id
        self._sheet_name = sheet_name
        self._service = build("sheets", "v4", credentials=credentials, cache_discovery=False)

    @property
    def append_range(self) -> str:
        return f"{self._sheet_name}!A1"

    async def append_row(self, row: Sequence[SheetCell]) -> None:
        body = {"values": [list(row)]}
        try:
            await asyncio.to_thread(self._append_sync, body)
        except HttpError as exc:
            self._log_error(action="append_row", exc=exc)
            raise SheetAppendError(f"Falha ao gravar na planilha (HTTP {http_status(exc)}).") from exc
        except Exception:
            self._log_error(action="append_row")
            raise

    def _append_sync(self, body: dict[str, Any]) -> dict[str, Any]:
        return (
            self._service.spreadsheets()
            .values()
            .append(
                spreadsheetId=self._spreadsheet_id,
                range=self.append_range,
                valueInputOption="USER_ENTERED",
                body=body,
            )
            .execute()
        )

    def _log_error(self, *, action: str, exc: HttpError | None = None) -> None:
        extra: dict[str, Any] = {
            "component": _COMPONENT,
            "action": action,
            "result": "error",
            "correlation_id": get_correlation_id(),
        }
        if exc is not None:
            extra["status_code"] = http_status(exc)
            extra["error_type"] = type(exc).__name__
            logger.error("google_sheets_http_error", extra=extra)
            return
        logger.exception("google_sheets_unexpected_error", extra=extra)

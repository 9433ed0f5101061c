"""Endpoints de health check e readiness."""

from __future__ import annotations

import asyncio
import os
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import Any, Literal

from fastapi import APIRouter
from fastapi.responses import JSONResponse, PlainTextResponse

from config.settings import get_email_settings, get_google_sheets_settings, get_pedido_settings

router = APIRouter()


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "degraded", "failed"]
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {"status": self.status, "error": self.error}


@router.get("/health", response_class=PlainTextResponse)
async def health_check() -> PlainTextResponse:
    """Liveness probe: responde `ok` em texto puro."""
    return PlainTextResponse("ok", status_code=200)


@router.get("/ready")
async def readiness_check() -> JSONResponse:
    """Readiness probe: planilha e backup são críticos; e-mail é opcional."""
    sheets_check = _check_sheets()
    email_check = _check_email()
    backup_check = await asyncio.to_thread(_check_backup_dir, Path(get_pedido_settings().data_dir))

    ready = sheets_check.status == "ok" and backup_check.status == "ok"
    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "sheets": sheets_check.as_dict(),
            "backup": backup_check.as_dict(),
            "email": email_check.as_dict(),
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


def _check_sheets() -> DependencyCheck:
    errors = get_google_sheets_settings().validate()
    if errors:
        return DependencyCheck(status="failed", error="not_configured")
    return DependencyCheck(status="ok")


def _check_email() -> DependencyCheck:
    if get_email_settings().validate():
        return DependencyCheck(status="degraded", error="not_configured")
    return DependencyCheck(status="ok")


def _check_backup_dir(data_dir: Path) -> DependencyCheck:
    # O diretório pode ainda não existir: vale o primeiro ancestral existente
    target = data_dir
    while not target.exists() and target != target.parent:
        target = target.parent
    if not target.is_dir():
        return DependencyCheck(status="failed", error="not_a_directory")
    if not os.access(target, os.W_OK):
        return DependencyCheck(status="failed", error="not_writable")
    return DependencyCheck(status="ok")

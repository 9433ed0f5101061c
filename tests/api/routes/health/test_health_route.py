"""Testes dos endpoints de health e readiness."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from api.routes.health.router import _check_backup_dir, health_check, readiness_check

_SERVICE_ACCOUNT = json.dumps({"type": "service_account", "client_email": "svc@example.com"})


def _configure_env(monkeypatch: pytest.MonkeyPatch, data_dir: Path, *, sheets: bool, email: bool) -> None:
    monkeypatch.setenv("PEDIDOS_DATA_DIR", str(data_dir))
    if sheets:
        monkeypatch.setenv("GOOGLE_SERVICE_ACCOUNT_JSON", _SERVICE_ACCOUNT)
        monkeypatch.setenv("GOOGLE_SHEET_ID", "sheet-123")
    else:
        monkeypatch.delenv("GOOGLE_SERVICE_ACCOUNT_JSON", raising=False)
        monkeypatch.delenv("GOOGLE_SHEET_ID", raising=False)
    if email:
        monkeypatch.setenv("SMTP_HOST", "smtp.example.com")
        monkeypatch.setenv("MAIL_FROM", "loja@example.com")
        monkeypatch.setenv("MAIL_TO", "ops@example.com")
    else:
        for name in ("SMTP_HOST", "MAIL_FROM", "MAIL_TO"):
            monkeypatch.delenv(name, raising=False)


@pytest.mark.asyncio
async def test_health_returns_plain_ok() -> None:
    response = await health_check()

    assert response.status_code == 200
    assert response.body == b"ok"
    assert response.media_type == "text/plain"


@pytest.mark.asyncio
async def test_readiness_returns_not_ready_without_sheets(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    _configure_env(monkeypatch, tmp_path, sheets=False, email=False)

    response = await readiness_check()
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["status"] == "not_ready"
    assert payload["checks"]["sheets"]["status"] == "failed"
    assert payload["checks"]["backup"]["status"] == "ok"
    assert payload["checks"]["email"]["status"] == "degraded"


@pytest.mark.asyncio
async def test_readiness_ready_when_critical_dependencies_are_ok(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    _configure_env(monkeypatch, tmp_path / "ainda" / "nao" / "existe", sheets=True, email=True)

    response = await readiness_check()
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 200
    assert payload["status"] == "ready"
    assert {name: check["status"] for name, check in payload["checks"].items()} == {
        "sheets": "ok",
        "backup": "ok",
        "email": "ok",
    }


@pytest.mark.asyncio
async def test_readiness_email_is_not_critical(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    _configure_env(monkeypatch, tmp_path, sheets=True, email=False)

    response = await readiness_check()

    assert response.status_code == 200


def test_backup_check_fails_when_path_is_a_file(tmp_path: Path) -> None:
    blocker = tmp_path / "arquivo.txt"
    blocker.write_text("x", encoding="utf-8")

    check = _check_backup_dir(blocker / "pedidos")

    assert check.status == "failed"
    assert check.error == "not_a_directory"

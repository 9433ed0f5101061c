"""Backup local dos pedidos: um arquivo JSON por pedidoId."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from app.protocols.backup_sink import BackupSinkProtocol
from app.services.pedido_notification import pedido_filename, pedido_to_json
from utils.errors import BackupWriteError

if TYPE_CHECKING:
    from app.domain.pedido import Pedido

logger = logging.getLogger(__name__)


class FileBackupStore(BackupSinkProtocol):
    """Grava `<data_dir>/pedido-<pedidoId>.json` (JSON indentado, UTF-8).

    O diretório é criado sob demanda. Cada pedido tem caminho próprio,
    então gravações concorrentes nunca colidem.
    """

    def __init__(self, data_dir: str | Path) -> None:
        self._data_dir = Path(data_dir)

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def path_for(self, pedido_id: str) -> Path:
        return self._data_dir / pedido_filename(pedido_id)

    async def write_pedido(self, pedido: Pedido) -> Path:
        path = self.path_for(pedido.pedido_id)
        content = pedido_to_json(pedido)
        try:
            await asyncio.to_thread(self._write_sync, path, content)
        except OSError as exc:
            logger.error(
                "pedido_backup_write_failed",
                extra={
                    "component": "file_backup_store",
                    "pedido_id": pedido.pedido_id,
                    "error_type": type(exc).__name__,
                },
            )
            raise BackupWriteError(f"Falha ao gravar backup do pedido: {exc.strerror or exc}") from exc
        logger.debug("pedido_backup_written", extra={"pedido_id": pedido.pedido_id})
        return path

    def _write_sync(self, path: Path, content: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")

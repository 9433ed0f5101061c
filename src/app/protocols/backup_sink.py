"""Contrato do backup em arquivo (destino obrigatório)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from app.domain.pedido import Pedido


@runtime_checkable
class BackupSinkProtocol(Protocol):
    """Grava o pedido completo em JSON, uma entrada por pedidoId."""

    async def write_pedido(self, pedido: Pedido) -> Path:
        """Persiste o pedido e retorna o caminho gravado; levanta em falha."""
        ...

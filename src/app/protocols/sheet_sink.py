"""Contrato da planilha de pedidos (destino obrigatório)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

SheetCell = str | int | float


@runtime_checkable
class SheetSinkProtocol(Protocol):
    """Anexa uma linha ao final da planilha.

    Deve levantar exceção em qualquer falha; não há semântica de linha
    parcial.
    """

    async def append_row(self, row: Sequence[SheetCell]) -> None: ...

"""Montagem do Pedido canônico a partir da submissão validada."""

from __future__ import annotations

import uuid
from collections.abc import Callable
from datetime import UTC, datetime

from app.domain.pedido import Origem, Pedido, PedidoValidado

Clock = Callable[[], datetime]
IdFactory = Callable[[], str]


def _utc_now() -> datetime:
    return datetime.now(UTC)


def _new_pedido_id() -> str:
    return str(uuid.uuid4())


def format_created_at(moment: datetime) -> str:
    """ISO-8601 em UTC com milissegundos e sufixo Z (2026-01-31T12:00:00.000Z)."""
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def canonicalize(
    validado: PedidoValidado,
    *,
    origem: Origem,
    clock: Clock | None = None,
    id_factory: IdFactory | None = None,
) -> Pedido:
    """Gera id e data de criação e monta o Pedido imutável.

    Não há caminho de falha: a entrada já foi validada.
    """
    now = (clock or _utc_now)()
    return Pedido(
        pedido_id=(id_factory or _new_pedido_id)(),
        created_at=format_created_at(now),
        origem=origem,
        destinatario=validado.destinatario,
        ender_dest=validado.ender_dest,
        itens=validado.itens,
        frete=validado.frete,
        obs=validado.obs,
    )


__all__ = ["canonicalize", "format_created_at"]

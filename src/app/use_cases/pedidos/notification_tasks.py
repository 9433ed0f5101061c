"""Registro das notificações de pedido que rodam depois da resposta HTTP.

Cada pedido aceito tem no máximo uma notificação em andamento, indexada
pelo pedidoId. O registro guarda referência forte à task até ela terminar,
limita quantos e-mails saem ao mesmo tempo e, no shutdown, espera as
pendentes por um tempo limitado antes de cancelar o resto.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Coroutine

logger = logging.getLogger(__name__)

MAX_CONCURRENT_NOTIFICATIONS = 4


@dataclass(frozen=True, slots=True)
class DrainSummary:
    """Resultado da drenagem no shutdown."""

    completed: int = 0
    cancelled: int = 0


class NotificationTaskRegistry:
    """Tasks de notificação em andamento, uma por pedido."""

    def __init__(self, max_concurrent: int = MAX_CONCURRENT_NOTIFICATIONS) -> None:
        if max_concurrent < 1:
            raise ValueError("max_concurrent deve ser >= 1")
        self._max_concurrent = max_concurrent
        self._semaphore: asyncio.Semaphore | None = None
        self._tasks: dict[str, asyncio.Task[None]] = {}

    def __len__(self) -> int:
        return len(self._tasks)

    def pending_ids(self) -> tuple[str, ...]:
        return tuple(self._tasks)

    def schedule(self, pedido_id: str, coroutine: Coroutine[Any, Any, None]) -> bool:
        """Agenda a notificação do pedido.

        Returns:
            False se já havia notificação em andamento para o mesmo pedido
            (a coroutine recebida é descartada sem rodar).
        """
        if pedido_id in self._tasks:
            coroutine.close()
            logger.warning(
                "pedido_notification_duplicate_ignored",
                extra={"pedido_id": pedido_id},
            )
            return False

        loop = asyncio.get_running_loop()
        task = loop.create_task(
            self._run(pedido_id, coroutine, loop.time()),
            name=f"notify-{pedido_id}",
        )
        self._tasks[pedido_id] = task
        task.add_done_callback(lambda done: self._forget(pedido_id, done))
        logger.info(
            "pedido_notification_scheduled",
            extra={"pedido_id": pedido_id, "pending_notifications": len(self._tasks)},
        )
        return True

    async def _run(
        self,
        pedido_id: str,
        coroutine: Coroutine[Any, Any, None],
        scheduled_at: float,
    ) -> None:
        loop = asyncio.get_running_loop()
        try:
            async with self._get_semaphore():
                queued_ms = int((loop.time() - scheduled_at) * 1000)
                await coroutine
        except Exception as exc:
            logger.error(
                "pedido_notification_task_failed",
                extra={"pedido_id": pedido_id, "error_type": type(exc).__name__},
            )
            return
        finally:
            # Cancelada ainda na fila: a coroutine nunca chegou a rodar
            coroutine.close()
        logger.debug(
            "pedido_notification_task_done",
            extra={
                "pedido_id": pedido_id,
                "queued_ms": queued_ms,
                "elapsed_ms": int((loop.time() - scheduled_at) * 1000),
            },
        )

    def _get_semaphore(self) -> asyncio.Semaphore:
        if self._semaphore is None:
            self._semaphore = asyncio.Semaphore(self._max_concurrent)
        return self._semaphore

    def _forget(self, pedido_id: str, task: asyncio.Task[None]) -> None:
        if self._tasks.get(pedido_id) is task:
            del self._tasks[pedido_id]

    async def drain(self, timeout_seconds: float) -> DrainSummary:
        """Aguarda as notificações pendentes; cancela as que estourarem o prazo."""
        if not self._tasks:
            return DrainSummary()

        waiting = dict(self._tasks)
        logger.info(
            "pedido_notification_shutdown_wait",
            extra={"pending_notifications": len(waiting), "timeout_seconds": timeout_seconds},
        )
        done, pending = await asyncio.wait(waiting.values(), timeout=timeout_seconds)
        if not pending:
            return DrainSummary(completed=len(done))

        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)
        logger.warning(
            "pedido_notification_shutdown_cancelled",
            extra={
                "cancelled_notifications": len(pending),
                "pedido_ids": sorted(pid for pid, task in waiting.items() if task in pending),
            },
        )
        return DrainSummary(completed=len(done), cancelled=len(pending))

    async def cancel_all(self) -> None:
        """Cancela tudo sem espera e zera o registro."""
        tasks = list(self._tasks.values())
        for task in tasks:
            task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await asyncio.gather(*tasks, return_exceptions=True)
        self._tasks.clear()
        self._semaphore = None


_registry = NotificationTaskRegistry()


def get_notification_registry() -> NotificationTaskRegistry:
    return _registry


def schedule_notification_task(
    *,
    pedido_id: str,
    coroutine: Coroutine[Any, Any, None],
) -> int:
    """Agenda no registro do processo e retorna quantas notificações estão pendentes."""
    _registry.schedule(pedido_id, coroutine)
    return len(_registry)


def active_task_count() -> int:
    return len(_registry)


async def drain_notification_tasks(timeout_seconds: float = 30.0) -> DrainSummary:
    return await _registry.drain(timeout_seconds)


__all__ = [
    "MAX_CONCURRENT_NOTIFICATIONS",
    "DrainSummary",
    "NotificationTaskRegistry",
    "active_task_count",
    "drain_notification_tasks",
    "get_notification_registry",
    "schedule_notification_task",
]

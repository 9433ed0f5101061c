"""Use cases de pedidos."""

from .notification_tasks import drain_notification_tasks, schedule_notification_task
from .submit_pedido import PedidoRuntimeConfig, SubmitPedidoUseCase

__all__ = [
    "PedidoRuntimeConfig",
    "SubmitPedidoUseCase",
    "drain_notification_tasks",
    "schedule_notification_task",
]

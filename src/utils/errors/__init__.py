"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    DEFAULT_SERVER_FAULT_MESSAGE,
    BackupWriteError,
    ClientInputError,
    InfrastructureError,
    MailDeliveryError,
    PedidoError,
    PedidoPersistenceError,
    ServerFaultError,
    SheetAppendError,
)

__all__ = [
    "DEFAULT_SERVER_FAULT_MESSAGE",
    "BackupWriteError",
    "ClientInputError",
    "InfrastructureError",
    "MailDeliveryError",
    "PedidoError",
    "PedidoPersistenceError",
    "ServerFaultError",
    "SheetAppendError",
]

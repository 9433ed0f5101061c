"""Exceções do pipeline de pedidos.

Duas classes de erro chegam ao cliente HTTP:
- ClientInputError: violação de regra de entrada (HTTP 400)
- ServerFaultError: falha de persistência ou erro inesperado (HTTP 500)

Falhas de notificação nunca chegam ao cliente: são capturadas e logadas
dentro da task em segundo plano.
"""

from __future__ import annotations

from http import HTTPStatus

DEFAULT_SERVER_FAULT_MESSAGE = "Erro interno."


class PedidoError(Exception):
    """Base para erros que viram resposta HTTP."""

    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ClientInputError(PedidoError, ValueError):
    """Entrada do cliente inválida (campo ausente, documento inválido...)."""

    status_code = HTTPStatus.BAD_REQUEST


class ServerFaultError(PedidoError, RuntimeError):
    """Falha do lado do servidor; o pedido não foi aceito."""

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR


class PedidoPersistenceError(ServerFaultError):
    """Falha em um dos destinos obrigatórios (planilha ou backup)."""

    def __init__(self, message: str, *, sink: str) -> None:
        super().__init__(message or DEFAULT_SERVER_FAULT_MESSAGE)
        self.sink = sink


class InfrastructureError(RuntimeError):
    """Base para falhas dos clients externos."""


class SheetAppendError(InfrastructureError):
    """Falha ao anexar linha na planilha."""


class BackupWriteError(InfrastructureError):
    """Falha ao gravar o backup JSON do pedido."""


class MailDeliveryError(InfrastructureError):
    """Falha de entrega SMTP."""

"""Use case de recebimento de pedido: persistência obrigatória + notificação.

Política de destinos:
1. Planilha (append da linha): obrigatório
2. Backup JSON em arquivo: obrigatório, só tentado após a planilha
3. E-mail ao operador: best-effort, em task destacada após a resposta

Se 1 ou 2 falhar o pedido não é aceito (PedidoPersistenceError → HTTP 500).
Não há compensação: se o backup falhar depois do append, a linha continua
na planilha e um reenvio do cliente gera linha duplicada.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.domain.pedido import PedidoAceito
from app.observability import get_correlation_id
from app.services.pedido_canonicalizer import canonicalize
from app.services.pedido_notification import build_notification, build_sheet_row
from app.use_cases.pedidos.notification_tasks import schedule_notification_task
from utils.errors import DEFAULT_SERVER_FAULT_MESSAGE, PedidoPersistenceError

if TYPE_CHECKING:
    from app.domain.pedido import Origem, Pedido, PedidoValidado
    from app.protocols.backup_sink import BackupSinkProtocol
    from app.protocols.mail_sender import MailSenderProtocol
    from app.protocols.sheet_sink import SheetSinkProtocol

logger = logging.getLogger(__name__)

_COMPONENT = "submit_pedido"


@dataclass(frozen=True, slots=True)
class PedidoRuntimeConfig:
    """Configuração fixa do deploy, montada uma vez no bootstrap.

    Attributes:
        origem: Local de origem gravado em todo pedido
        mail_from: Remetente do e-mail de notificação
        mail_to: Destinatário (operador) do e-mail de notificação
    """

    origem: Origem
    mail_from: str
    mail_to: str


class SubmitPedidoUseCase:
    """Orquestra persistência obrigatória e notificação best-effort."""

    def __init__(
        self,
        *,
        sheet_sink: SheetSinkProtocol,
        backup_sink: BackupSinkProtocol,
        mail_sender: MailSenderProtocol,
        config: PedidoRuntimeConfig,
    ) -> None:
        self._sheet_sink = sheet_sink
        self._backup_sink = backup_sink
        self._mail_sender = mail_sender
        self._config = config

    def build_pedido(self, validado: PedidoValidado) -> Pedido:
        """Canonicaliza a submissão validada com a origem do deploy."""
        return canonicalize(validado, origem=self._config.origem)

    async def submit(self, pedido: Pedido) -> PedidoAceito:
        """Persiste nos destinos obrigatórios, em sequência.

        Raises:
            PedidoPersistenceError: Se planilha ou backup falhar.
        """
        started_at = time.perf_counter()
        try:
            await self._sheet_sink.append_row(build_sheet_row(pedido))
        except Exception as exc:
            raise self._persistence_error("sheets", pedido, exc) from exc

        try:
            await self._backup_sink.write_pedido(pedido)
        except Exception as exc:
            raise self._persistence_error("backup", pedido, exc) from exc

        logger.info(
            "pedido_accepted",
            extra={
                "component": _COMPONENT,
                "pedido_id": pedido.pedido_id,
                "itens": len(pedido.itens),
                "uf": pedido.ender_dest.uf,
                "latency_ms": round((time.perf_counter() - started_at) * 1000, 2),
                "correlation_id": get_correlation_id(),
            },
        )
        return PedidoAceito(pedido_id=pedido.pedido_id)

    def schedule_notification(self, pedido: Pedido) -> None:
        """Dispara o e-mail em task destacada (não aguardada).

        Deve ser chamado só depois que a resposta foi enviada ao cliente.
        """
        schedule_notification_task(
            pedido_id=pedido.pedido_id,
            coroutine=self.notify(pedido),
        )

    async def notify(self, pedido: Pedido) -> None:
        """Envia o e-mail do pedido; falhas são logadas e descartadas."""
        try:
            message = build_notification(
                pedido,
                sender=self._config.mail_from,
                to=self._config.mail_to,
            )
            await self._mail_sender.send(message)
        except Exception as exc:
            logger.error(
                "pedido_notification_failed",
                extra={
                    "component": _COMPONENT,
                    "pedido_id": pedido.pedido_id,
                    "error_type": type(exc).__name__,
                    "error": str(exc),
                },
            )
            return
        logger.info(
            "pedido_notification_sent",
            extra={"component": _COMPONENT, "pedido_id": pedido.pedido_id},
        )

    @staticmethod
    def _persistence_error(
        sink: str,
        pedido: Pedido,
        exc: Exception,
    ) -> PedidoPersistenceError:
        logger.error(
            "pedido_persistence_failed",
            extra={
                "component": _COMPONENT,
                "sink": sink,
                "pedido_id": pedido.pedido_id,
                "error_type": type(exc).__name__,
                "correlation_id": get_correlation_id(),
            },
        )
        return PedidoPersistenceError(str(exc) or DEFAULT_SERVER_FAULT_MESSAGE, sink=sink)


__all__ = ["PedidoRuntimeConfig", "SubmitPedidoUseCase"]

"""Factories do pipeline de pedidos: wiring de destinos e use case."""

from __future__ import annotations

import logging
from functools import lru_cache

from app.bootstrap.clients import create_mail_sender, create_sheets_client
from app.domain.pedido import Origem
from app.infra.backup import FileBackupStore
from app.use_cases.pedidos import PedidoRuntimeConfig, SubmitPedidoUseCase
from config.settings import get_email_settings, get_pedido_settings

logger = logging.getLogger(__name__)


def create_backup_store() -> FileBackupStore:
    """Backup JSON no diretório PEDIDOS_DATA_DIR."""
    return FileBackupStore(get_pedido_settings().data_dir)


def create_pedido_runtime_config() -> PedidoRuntimeConfig:
    """Monta a configuração fixa do deploy a partir do ambiente."""
    pedido_settings = get_pedido_settings()
    email_settings = get_email_settings()
    return PedidoRuntimeConfig(
        origem=Origem(uf=pedido_settings.origem_uf, municipio=pedido_settings.origem_municipio),
        mail_from=email_settings.mail_from,
        mail_to=email_settings.mail_to,
    )


@lru_cache(maxsize=1)
def create_submit_pedido_use_case() -> SubmitPedidoUseCase:
    """Cria o use case de pedidos com os destinos concretos (singleton).

    Raises:
        ValueError: Se a planilha não estiver configurada.
    """
    use_case = SubmitPedidoUseCase(
        sheet_sink=create_sheets_client(),
        backup_sink=create_backup_store(),
        mail_sender=create_mail_sender(),
        config=create_pedido_runtime_config(),
    )
    logger.info("submit_pedido_use_case_created", extra={"component": "bootstrap"})
    return use_case

"""Logging estruturado (JSON) do serviço de pedidos.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (bootstrap)
    configure_logging(level="INFO", service_name="pedidos_api")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("pedido_accepted", extra={"pedido_id": pedido_id})

Todo log carrega correlation_id e service. Nunca logar payload bruto,
CPF/CNPJ ou e-mail do cliente.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter, SensitiveFieldFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "SensitiveFieldFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]

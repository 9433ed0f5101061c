"""Filters de logging do serviço de pedidos.

- CorrelationIdFilter: injeta `correlation_id` e `service` em todo record
- SensitiveFieldFilter: mascara dados do cliente passados por engano em `extra`
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

# Campos do formulário que identificam o cliente
SENSITIVE_FIELDS = frozenset({"doc", "cpf", "cnpj", "ie", "email", "fone", "x_nome", "xnome"})

REDACTED = "***"


class CorrelationIdFilter(logging.Filter):
    """Enriquece cada record com `correlation_id` e `service`.

    Um correlation_id passado explicitamente via `extra` tem precedência
    sobre o valor do contexto (tasks de notificação rodam fora da request).
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._correlation_id_getter = correlation_id_getter

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "correlation_id", None):
            getter = self._correlation_id_getter
            record.correlation_id = getter() if getter is not None else ""
        record.service = self._service_name
        return True


class SensitiveFieldFilter(logging.Filter):
    """Substitui por `***` qualquer atributo de `extra` com nome sensível."""

    def filter(self, record: logging.LogRecord) -> bool:
        for name in list(vars(record)):
            if name.lower() in SENSITIVE_FIELDS:
                setattr(record, name, REDACTED)
        return True

"""Observabilidade: correlation_id das requisições de pedido.

Métricas não são coletadas; o rastreio é feito pelos logs JSON, que
carregam o correlation_id de `config.logging`.
"""

from app.observability.correlation import (
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    sanitize_correlation_id,
    set_correlation_id,
)

__all__ = [
    "generate_correlation_id",
    "get_correlation_id",
    "reset_correlation_id",
    "sanitize_correlation_id",
    "set_correlation_id",
]

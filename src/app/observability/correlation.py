"""Correlation id por requisição, propagado para todos os logs.

Guardado em ContextVar: cada request HTTP (e cada task criada a partir
dela) enxerga o próprio valor, sem interferência entre pedidos concorrentes.
O valor recebido no header vem do cliente, então é higienizado antes de
entrar nos logs.

Uso:
    token = set_correlation_id(request.headers.get("x-correlation-id"))
    try:
        ...
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import re
import uuid
from contextvars import ContextVar, Token

MAX_CORRELATION_ID_LENGTH = 128

_ALLOWED = re.compile(r"[A-Za-z0-9._:\-]+")

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def generate_correlation_id() -> str:
    return str(uuid.uuid4())


def sanitize_correlation_id(raw: str | None) -> str | None:
    """Valor do header se for curto e só com [A-Za-z0-9._:-]; senão None."""
    if not raw:
        return None
    value = raw.strip()
    if not value or len(value) > MAX_CORRELATION_ID_LENGTH or not _ALLOWED.fullmatch(value):
        return None
    return value


def get_correlation_id() -> str:
    """correlation_id do contexto atual ("" fora de uma requisição)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id; gera um UUID4 se vier vazio ou inválido."""
    return _correlation_id.set(sanitize_correlation_id(correlation_id) or generate_correlation_id())


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)

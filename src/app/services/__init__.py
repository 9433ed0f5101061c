"""Serviços de aplicação do pipeline de pedidos (sem IO direto).

Implementações concretas de IO ficam em app/infra/.
"""

from app.services.pedido_canonicalizer import canonicalize
from app.services.pedido_validator import ValidationFailure, validate_submission

__all__ = [
    "ValidationFailure",
    "canonicalize",
    "validate_submission",
]

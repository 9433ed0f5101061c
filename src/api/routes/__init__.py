"""Rotas HTTP da API.

- routes/health/: liveness e readiness
- routes/pedidos/: recebimento de pedidos
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import API_PREFIX, create_api_router

__all__ = ["API_PREFIX", "create_api_router"]

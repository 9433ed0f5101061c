"""Entrypoint da aplicação de pedidos.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 3000

Uso (desenvolvimento):
    uvicorn app.app:app --reload --port 3000
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from api.middleware import FixedWindowRateLimiter, RateLimitMiddleware, RequestContextMiddleware
from api.routes import API_PREFIX, create_api_router
from app.bootstrap import initialize_app, validate_runtime_settings
from app.use_cases.pedidos import drain_notification_tasks
from config.logging import get_logger
from config.settings import get_base_settings, get_pedido_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Inicializar logging ANTES de qualquer log de módulo
initialize_app()

logger = get_logger(__name__)

SHUTDOWN_DRAIN_TIMEOUT_SECONDS = 30.0


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup valida settings; shutdown drena notificações pendentes."""
    logger.info("app_starting", extra={"service": get_base_settings().service_name})
    validate_runtime_settings()

    yield

    logger.info("app_shutting_down", extra={"service": get_base_settings().service_name})
    await drain_notification_tasks(timeout_seconds=SHUTDOWN_DRAIN_TIMEOUT_SECONDS)


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Returns:
        Aplicação FastAPI configurada.
    """
    pedido_settings = get_pedido_settings()
    fastapi_app = FastAPI(
        title="Pedidos API",
        description="Recebimento de pedidos com validação de CPF/CNPJ",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Último adicionado roda primeiro: contexto envolve o rate limit
    if pedido_settings.rate_limit_enabled:
        fastapi_app.add_middleware(
            RateLimitMiddleware,
            limiter=FixedWindowRateLimiter(
                max_requests=pedido_settings.rate_limit_max_requests,
                window_seconds=pedido_settings.rate_limit_window_seconds,
            ),
            path_prefix=f"{API_PREFIX}/",
        )
    fastapi_app.add_middleware(RequestContextMiddleware)

    fastapi_app.include_router(create_api_router())

    # Formulário estático na raiz; rotas da API têm precedência
    static_dir = Path(pedido_settings.static_dir)
    if static_dir.is_dir():
        fastapi_app.mount("/", StaticFiles(directory=static_dir, html=True), name="public")

    logger.info(
        "app_configured",
        extra={"static_dir": str(static_dir), "rate_limit": pedido_settings.rate_limit_enabled},
    )
    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta."""
    import uvicorn

    settings = get_base_settings()
    logger.info("Starting pedidos-api", extra={"port": settings.port})
    uvicorn.run(
        "app.app:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()

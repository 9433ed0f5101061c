"""Endpoint de recebimento de pedidos.

Endpoint:
- POST /api/pedidos: valida, persiste (planilha + backup) e agenda e-mail

Respostas:
- 200 {"ok": true, "pedidoId": "<uuid>"}: pedido aceito
- 400 texto puro: erro de entrada (primeira regra violada)
- 413 texto puro: corpo acima do limite
- 500 texto puro: falha de persistência ou erro inesperado

O e-mail ao operador roda como BackgroundTask, ou seja, só depois que a
resposta foi enviada; falhas dele nunca alteram a resposta.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.background import BackgroundTask

from app.observability import get_correlation_id
from app.services.pedido_validator import ValidationFailure, validate_submission
from config.settings import get_pedido_settings
from utils.errors import DEFAULT_SERVER_FAULT_MESSAGE, PedidoError

if TYPE_CHECKING:
    from app.domain.pedido import Pedido
    from app.use_cases.pedidos import SubmitPedidoUseCase

logger = logging.getLogger(__name__)

router = APIRouter()

PAYLOAD_TOO_LARGE_MESSAGE = "Payload muito grande."
INVALID_JSON_MESSAGE = "JSON inválido."


def get_submit_pedido_use_case() -> SubmitPedidoUseCase:
    """Obtém o use case de pedidos (lazy-loading, singleton do bootstrap)."""
    from app.bootstrap.dependencies import create_submit_pedido_use_case

    return create_submit_pedido_use_case()


def _text(content: str, status_code: int) -> PlainTextResponse:
    return PlainTextResponse(content=content, status_code=status_code)


def _declared_length(request: Request) -> int | None:
    raw = request.headers.get("content-length")
    if raw is None or not raw.isdigit():
        return None
    return int(raw)


async def _read_payload(request: Request, max_bytes: int) -> Any | Response:
    declared = _declared_length(request)
    if declared is not None and declared > max_bytes:
        return _text(PAYLOAD_TOO_LARGE_MESSAGE, status.HTTP_413_REQUEST_ENTITY_TOO_LARGE)
    raw_body = await request.body()
    if len(raw_body) > max_bytes:
        return _text(PAYLOAD_TOO_LARGE_MESSAGE, status.HTTP_413_REQUEST_ENTITY_TOO_LARGE)
    if not raw_body.strip():
        return {}
    try:
        return json.loads(raw_body)
    except ValueError:
        logger.warning(
            "pedido_json_invalid",
            extra={"payload_size": len(raw_body), "correlation_id": get_correlation_id()},
        )
        return _text(INVALID_JSON_MESSAGE, status.HTTP_400_BAD_REQUEST)


async def _dispatch_notification(use_case: SubmitPedidoUseCase, pedido: Pedido) -> None:
    # Roda no event loop depois do envio da resposta
    use_case.schedule_notification(pedido)


@router.post("/pedidos", response_model=None)
async def criar_pedido(request: Request) -> Response:
    """Recebe um pedido do formulário e devolve o pedidoId gerado."""
    payload = await _read_payload(request, get_pedido_settings().max_body_bytes)
    if isinstance(payload, Response):
        return payload

    try:
        result = validate_submission(payload)
        if isinstance(result, ValidationFailure):
            raise result.to_exception()
        use_case = get_submit_pedido_use_case()
        pedido = use_case.build_pedido(result)
        aceito = await use_case.submit(pedido)
    except PedidoError as exc:
        return _text(exc.message, exc.status_code)
    except Exception as exc:
        logger.exception(
            "pedido_unexpected_error",
            extra={"correlation_id": get_correlation_id(), "error_type": type(exc).__name__},
        )
        return _text(str(exc) or DEFAULT_SERVER_FAULT_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)

    return JSONResponse(
        content=aceito.model_dump(mode="json", by_alias=True),
        status_code=status.HTTP_200_OK,
        background=BackgroundTask(_dispatch_notification, use_case, pedido),
    )

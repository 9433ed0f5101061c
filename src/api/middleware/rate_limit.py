"""Rate limit por IP em janela fixa para as rotas de /api/.

Contadores em memória do processo (um único worker). Cabeçalhos no
formato `RateLimit-*` (draft IETF) em toda resposta limitada.
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import PlainTextResponse

if TYPE_CHECKING:
    from collections.abc import Callable

    from starlette.middleware.base import RequestResponseEndpoint
    from starlette.requests import Request
    from starlette.responses import Response
    from starlette.types import ASGIApp

logger = logging.getLogger(__name__)

TOO_MANY_REQUESTS_MESSAGE = "Muitas requisições. Tente novamente em instantes."


@dataclass(slots=True)
class _Window:
    count: int
    reset_at: float


@dataclass(frozen=True, slots=True)
class RateLimitDecision:
    allowed: bool
    limit: int
    remaining: int
    reset_seconds: int

    def headers(self) -> dict[str, str]:
        return {
            "RateLimit-Limit": str(self.limit),
            "RateLimit-Remaining": str(self.remaining),
            "RateLimit-Reset": str(self.reset_seconds),
        }


class FixedWindowRateLimiter:
    """Conta requisições por chave em janelas fixas de `window_seconds`."""

    def __init__(
        self,
        *,
        max_requests: int,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._max_requests = max_requests
        self._window_seconds = window_seconds
        self._clock = clock
        self._windows: dict[str, _Window] = {}

    def hit(self, key: str) -> RateLimitDecision:
        now = self._clock()
        self._prune(now)
        window = self._windows.get(key)
        if window is None or window.reset_at <= now:
            window = _Window(count=0, reset_at=now + self._window_seconds)
            self._windows[key] = window
        window.count += 1
        return RateLimitDecision(
            allowed=window.count <= self._max_requests,
            limit=self._max_requests,
            remaining=max(self._max_requests - window.count, 0),
            reset_seconds=max(math.ceil(window.reset_at - now), 0),
        )

    def _prune(self, now: float) -> None:
        expired = [key for key, window in self._windows.items() if window.reset_at <= now]
        for key in expired:
            del self._windows[key]


def client_ip(request: Request, *, trusted_proxies: int = 1) -> str:
    """IP do cliente considerando `trusted_proxies` saltos em X-Forwarded-For."""
    forwarded = request.headers.get("x-forwarded-for", "")
    hops = [hop.strip() for hop in forwarded.split(",") if hop.strip()]
    if hops and trusted_proxies > 0:
        return hops[-min(trusted_proxies, len(hops))]
    if request.client is not None:
        return request.client.host
    return "unknown"


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Aplica o limiter às requisições cujo path começa com `path_prefix`."""

    def __init__(
        self,
        app: ASGIApp,
        *,
        limiter: FixedWindowRateLimiter,
        path_prefix: str = "/api/",
        trusted_proxies: int = 1,
    ) -> None:
        super().__init__(app)
        self._limiter = limiter
        self._path_prefix = path_prefix
        self._trusted_proxies = trusted_proxies

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if not request.url.path.startswith(self._path_prefix):
            return await call_next(request)

        decision = self._limiter.hit(client_ip(request, trusted_proxies=self._trusted_proxies))
        if not decision.allowed:
            logger.warning(
                "rate_limit_exceeded",
                extra={"path": request.url.path, "limit": decision.limit},
            )
            return PlainTextResponse(
                TOO_MANY_REQUESTS_MESSAGE,
                status_code=429,
                headers=decision.headers(),
            )

        response = await call_next(request)
        response.headers.update(decision.headers())
        return response

"""Middlewares HTTP: contexto de requisição e rate limit."""

from api.middleware.rate_limit import FixedWindowRateLimiter, RateLimitMiddleware
from api.middleware.request_context import RequestContextMiddleware

__all__ = ["FixedWindowRateLimiter", "RateLimitMiddleware", "RequestContextMiddleware"]

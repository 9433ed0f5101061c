"""Testes do correlation_id por requisição."""

from __future__ import annotations

import uuid

import pytest

from app.observability import (
    get_correlation_id,
    reset_correlation_id,
    sanitize_correlation_id,
    set_correlation_id,
)


def test_header_value_is_used_and_reset() -> None:
    token = set_correlation_id("req-42")
    try:
        assert get_correlation_id() == "req-42"
    finally:
        reset_correlation_id(token)
    assert get_correlation_id() == ""


@pytest.mark.parametrize("raw", [None, "", "   ", "a b", "x" * 129, "id\nforged-log-line"])
def test_missing_or_unsafe_header_gets_fresh_uuid(raw: str | None) -> None:
    assert sanitize_correlation_id(raw) is None

    token = set_correlation_id(raw)
    try:
        assert str(uuid.UUID(get_correlation_id())) == get_correlation_id()
    finally:
        reset_correlation_id(token)


def test_sanitize_trims_surrounding_spaces() -> None:
    assert sanitize_correlation_id("  abc-123:1  ") == "abc-123:1"

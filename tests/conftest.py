"""Configuração do pytest para o serviço de pedidos."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from config.settings import (  # noqa: E402
    get_base_settings,
    get_email_settings,
    get_google_sheets_settings,
    get_pedido_settings,
)
from tests.fakes.pedido_payloads import build_payload  # noqa: E402

_SETTINGS_GETTERS = (
    get_base_settings,
    get_email_settings,
    get_google_sheets_settings,
    get_pedido_settings,
)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Settings são lru_cache: cada teste lê o ambiente do zero."""
    for getter in _SETTINGS_GETTERS:
        getter.cache_clear()
    yield
    for getter in _SETTINGS_GETTERS:
        getter.cache_clear()


@pytest.fixture
def valid_payload() -> dict[str, object]:
    return build_payload()

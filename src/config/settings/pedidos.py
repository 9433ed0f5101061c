"""Settings do endpoint de pedidos: origem, backup, limites e rate limit."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

MAX_BODY_BYTES_DEFAULT = 1024 * 1024


@dataclass(frozen=True)
class PedidoSettings:
    """Configurações do pipeline de pedidos.

    Attributes:
        data_dir: Diretório do backup JSON (um arquivo por pedido)
        origem_uf: UF de origem fixa do deploy
        origem_municipio: Município de origem fixa do deploy
        max_body_bytes: Tamanho máximo do corpo do POST
        static_dir: Diretório de arquivos estáticos (formulário)
        rate_limit_enabled: Liga o rate limit em /api/
        rate_limit_window_seconds: Janela do rate limit
        rate_limit_max_requests: Requisições permitidas por IP na janela
    """

    data_dir: str = "data"
    origem_uf: str = "RJ"
    origem_municipio: str = "Saquarema"
    max_body_bytes: int = MAX_BODY_BYTES_DEFAULT
    static_dir: str = "public"
    rate_limit_enabled: bool = True
    rate_limit_window_seconds: int = 60
    rate_limit_max_requests: int = 30

    def validate(self) -> list[str]:
        errors: list[str] = []
        if not self.data_dir:
            errors.append("PEDIDOS_DATA_DIR não pode ser vazio")
        if not self.origem_uf or not self.origem_municipio:
            errors.append("ORIGEM_UF/ORIGEM_MUNICIPIO não configurados")
        if self.max_body_bytes < 1:
            errors.append("PEDIDOS_MAX_BODY_BYTES deve ser >= 1")
        if self.rate_limit_window_seconds < 1:
            errors.append("RATE_LIMIT_WINDOW_SECONDS deve ser >= 1")
        if self.rate_limit_max_requests < 1:
            errors.append("RATE_LIMIT_MAX_REQUESTS deve ser >= 1")
        return errors


def _load_pedido_from_env() -> PedidoSettings:
    """Carrega PedidoSettings de variáveis de ambiente."""
    return PedidoSettings(
        data_dir=os.getenv("PEDIDOS_DATA_DIR", "data"),
        origem_uf=os.getenv("ORIGEM_UF", "RJ").upper(),
        origem_municipio=os.getenv("ORIGEM_MUNICIPIO", "Saquarema"),
        max_body_bytes=int(os.getenv("PEDIDOS_MAX_BODY_BYTES", str(MAX_BODY_BYTES_DEFAULT))),
        static_dir=os.getenv("STATIC_DIR", "public"),
        rate_limit_enabled=os.getenv("RATE_LIMIT_ENABLED", "true").lower() in ("true", "1"),
        rate_limit_window_seconds=int(os.getenv("RATE_LIMIT_WINDOW_SECONDS", "60")),
        rate_limit_max_requests=int(os.getenv("RATE_LIMIT_MAX_REQUESTS", "30")),
    )


@lru_cache(maxsize=1)
def get_pedido_settings() -> PedidoSettings:
    """Retorna instância cacheada de PedidoSettings."""
    return _load_pedido_from_env()

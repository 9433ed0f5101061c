"""Formatter JSON (python-json-logger) com os campos padrão do serviço."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Presentes em todo log; campos de `extra` são anexados ao lado destes
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Formatter que emite, por exemplo:

        {"asctime": "...", "level": "INFO", "logger": "app.use_cases...",
         "message": "pedido_accepted", "correlation_id": "...",
         "service": "pedidos_api", "pedido_id": "..."}
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)

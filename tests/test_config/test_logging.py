"""Testes do logging JSON do serviço de pedidos."""

from __future__ import annotations

import io
import json
import logging

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    SensitiveFieldFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
)
from config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS


def _record(msg: str = "pedido_accepted", **extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="app.use_cases.pedidos.submit_pedido",
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestConfigureLogging:
    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            ("DEBUG", logging.DEBUG),
            ("info", logging.INFO),
            ("warning", logging.WARNING),
            ("ERROR", logging.ERROR),
            ("CRITICAL", logging.CRITICAL),
        ],
    )
    def test_sets_root_level(self, level: str, expected: int) -> None:
        configure_logging(level=level)
        assert logging.getLogger().level == expected

    def test_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="VERBOSE")

    def test_replaces_existing_handlers(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]

        configure_logging()

        (handler,) = root.handlers
        filter_types = {type(f) for f in handler.filters}
        assert filter_types == {CorrelationIdFilter, SensitiveFieldFilter}

    def test_noisy_library_loggers_are_quieted(self) -> None:
        configure_logging(level="DEBUG")
        assert logging.getLogger("urllib3").level == logging.WARNING
        assert logging.getLogger("googleapiclient.discovery_cache").level == logging.WARNING

    def test_constants(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "pedidos_api"

    def test_get_logger_is_stdlib_logger(self) -> None:
        assert get_logger("app.services") is logging.getLogger("app.services")


class TestCorrelationIdFilter:
    def test_injects_context_value_and_service(self) -> None:
        record = _record()

        assert CorrelationIdFilter("pedidos_api", lambda: "corr-123").filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "pedidos_api"

    def test_explicit_extra_wins(self) -> None:
        record = _record(correlation_id="from-extra")
        CorrelationIdFilter("svc", lambda: "from-context").filter(record)
        assert record.correlation_id == "from-extra"

    def test_without_getter_uses_empty_string(self) -> None:
        record = _record()
        CorrelationIdFilter("svc").filter(record)
        assert record.correlation_id == ""


class TestSensitiveFieldFilter:
    def test_masks_customer_fields(self) -> None:
        record = _record(doc="111.444.777-35", email="maria@example.com", CNPJ="11222333000181")

        assert SensitiveFieldFilter().filter(record) is True
        assert (record.doc, record.email, record.CNPJ) == ("***", "***", "***")

    def test_keeps_operational_fields(self) -> None:
        record = _record(pedido_id="abc-123", uf="RJ", itens=2)
        SensitiveFieldFilter().filter(record)
        assert (record.pedido_id, record.uf, record.itens) == ("abc-123", "RJ", 2)


class TestJsonFormatter:
    def test_required_fields_are_ordered(self) -> None:
        assert REQUIRED_LOG_FIELDS == (
            "asctime",
            "levelname",
            "name",
            "message",
            "correlation_id",
            "service",
        )
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_output_uses_renamed_fields_and_extra(self) -> None:
        record = _record("pedido_persistence_failed", correlation_id="corr-1", service="pedidos_api")
        record.sink = "sheets"

        output = json.loads(create_json_formatter().format(record))

        assert output["level"] == "INFO"
        assert output["logger"] == "app.use_cases.pedidos.submit_pedido"
        assert output["message"] == "pedido_persistence_failed"
        assert output["correlation_id"] == "corr-1"
        assert output["service"] == "pedidos_api"
        assert output["sink"] == "sheets"


def test_configured_handler_emits_masked_json_line() -> None:
    configure_logging(level="INFO", service_name="pedidos_test", correlation_id_getter=lambda: "c-9")
    stream = io.StringIO()
    logging.getLogger().handlers[0].setStream(stream)

    get_logger("tests.logging").info("pedido_debug", extra={"pedido_id": "p-1", "doc": "123"})

    line = json.loads(stream.getvalue().strip())
    assert line["service"] == "pedidos_test"
    assert line["correlation_id"] == "c-9"
    assert line["pedido_id"] == "p-1"
    assert line["doc"] == "***"

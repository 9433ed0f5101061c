"""Testes da canonicalização do pedido."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from app.domain.pedido import Origem, Pedido, PedidoValidado
from app.services.pedido_canonicalizer import canonicalize, format_created_at
from app.services.pedido_validator import validate_submission
from tests.fakes.pedido_payloads import build_payload

ORIGEM = Origem(uf="RJ", municipio="Saquarema")


@pytest.fixture
def validado() -> PedidoValidado:
    result = validate_submission(build_payload())
    assert isinstance(result, PedidoValidado)
    return result


def test_canonicalize_assigns_uuid4_and_origin(validado: PedidoValidado) -> None:
    pedido = canonicalize(validado, origem=ORIGEM)

    assert uuid.UUID(pedido.pedido_id).version == 4
    assert pedido.origem == ORIGEM
    assert pedido.created_at.endswith("Z")


def test_canonicalize_twice_differs_only_in_id_and_timestamp(validado: PedidoValidado) -> None:
    moments = iter(
        [
            datetime(2026, 1, 31, 12, 0, 0, tzinfo=UTC),
            datetime(2026, 1, 31, 12, 0, 1, tzinfo=UTC),
        ]
    )

    first = canonicalize(validado, origem=ORIGEM, clock=lambda: next(moments))
    second = canonicalize(validado, origem=ORIGEM, clock=lambda: next(moments))

    assert first.pedido_id != second.pedido_id
    assert first.created_at != second.created_at
    assert first.destinatario == second.destinatario
    assert first.ender_dest == second.ender_dest
    assert first.itens == second.itens


def test_canonicalize_uses_injected_factories(validado: PedidoValidado) -> None:
    pedido = canonicalize(
        validado,
        origem=ORIGEM,
        clock=lambda: datetime(2026, 10, 17, 9, 30, 15, 123456, tzinfo=UTC),
        id_factory=lambda: "pedido-fixo",
    )
    assert pedido.pedido_id == "pedido-fixo"
    assert pedido.created_at == "2026-10-17T09:30:15.123Z"


def test_format_created_at_converts_to_utc() -> None:
    moment = datetime(2026, 10, 17, 6, 0, tzinfo=timezone(timedelta(hours=-3)))
    assert format_created_at(moment) == "2026-10-17T09:00:00.000Z"


def test_pedido_is_immutable(validado: PedidoValidado) -> None:
    pedido = canonicalize(validado, origem=ORIGEM)
    with pytest.raises(ValidationError):
        pedido.frete = "SEDEX"  # type: ignore[misc]


def test_json_dict_uses_wire_names_and_omits_absent_fields(validado: PedidoValidado) -> None:
    data = canonicalize(validado, origem=ORIGEM).to_json_dict()

    assert set(data) == {
        "pedidoId",
        "createdAt",
        "origem",
        "destinatario",
        "enderDest",
        "itens",
        "frete",
        "obs",
    }
    assert data["origem"] == {"UF": "RJ", "municipio": "Saquarema"}
    assert data["destinatario"]["CPF"] == "11144477735"
    assert "CNPJ" not in data["destinatario"]
    assert "IE" not in data["destinatario"]
    assert data["itens"] == [{"sku": "ABC", "qtd": 2, "variacao": ""}]


def test_pedido_round_trips_from_json_dict(validado: PedidoValidado) -> None:
    pedido = canonicalize(validado, origem=ORIGEM)
    assert Pedido.model_validate(pedido.to_json_dict()) == pedido

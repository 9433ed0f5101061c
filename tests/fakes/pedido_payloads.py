"""Payloads de submissão usados nos testes."""

from __future__ import annotations

VALID_CPF = "111.444.777-35"
VALID_CNPJ = "11.222.333/0001-81"


def build_payload(**overrides: object) -> dict[str, object]:
    """Submissão válida de PF com um item; campos sobrescrevíveis."""
    payload: dict[str, object] = {
        "tipoCliente": "PF",
        "xNome": "  Maria da Silva ",
        "doc": VALID_CPF,
        "email": "maria@example.com",
        "fone": "(22) 99999-0000",
        "indIEDest": "9",
        "enderDest": {
            "CEP": "28990-000",
            "xLgr": "Rua das Flores",
            "nro": "10",
            "xCpl": "",
            "xBairro": "Centro",
            "xMun": "Saquarema",
            "UF": "rj",
        },
        "itens": [{"sku": "ABC", "qtd": 2}],
        "frete": "PAC",
        "obs": "",
    }
    payload.update(overrides)
    return payload


def build_endereco(**overrides: object) -> dict[str, object]:
    endereco = dict(build_payload()["enderDest"])  # type: ignore[call-overload]
    endereco.update(overrides)
    return endereco

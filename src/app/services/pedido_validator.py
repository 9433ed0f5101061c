"""Validação da submissão bruta de pedido.

Regras avaliadas em ordem fixa; a primeira violação encerra a validação
(fail-fast) e vira um ValidationFailure com mensagem específica do campo.
Em caso de sucesso retorna um PedidoValidado já normalizado: documento e
CEP só com dígitos, UF maiúscula, strings aparadas e quantidades numéricas.

Uso:
    result = validate_submission(payload)
    if isinstance(result, ValidationFailure):
        return PlainTextResponse(result.message, status_code=400)
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Literal

from app.domain.documentos import is_documento_valido
from app.domain.pedido import (
    IND_IE_CONTRIBUINTE,
    Destinatario,
    EnderecoDestino,
    ItemPedido,
    PedidoValidado,
)
from utils.errors import ClientInputError
from utils.normalizers import clean, only_digits

logger = logging.getLogger(__name__)

TIPOS_CLIENTE = ("PF", "PJ")
IND_IE_DEST_VALIDOS = ("1", "2", "9")

# (campo, mensagem) na ordem em que são checados
_CAMPOS_CLIENTE = (
    ("xNome", "xNome obrigatório."),
    ("doc", "doc (CPF/CNPJ) obrigatório."),
    ("email", "email obrigatório."),
    ("fone", "fone/whatsapp obrigatório."),
)
_CAMPOS_ENDERECO = (
    ("CEP", "CEP obrigatório."),
    ("xLgr", "Logradouro obrigatório."),
    ("nro", "Número obrigatório."),
    ("xBairro", "Bairro obrigatório."),
    ("xMun", "Cidade (xMun) obrigatória."),
    ("UF", "UF obrigatória."),
)


@dataclass(frozen=True, slots=True)
class ValidationFailure:
    """Primeira regra violada pela submissão (erro de entrada do cliente)."""

    message: str
    kind: Literal["client_input"] = "client_input"

    def to_exception(self) -> ClientInputError:
        return ClientInputError(self.message)


Check = Callable[[Mapping[str, Any]], str | None]


def _as_object(value: Any) -> Mapping[str, Any] | None:
    """Objeto JSON; arrays contam como objeto sem campos."""
    if isinstance(value, Mapping):
        return value
    if isinstance(value, list):
        return {}
    return None


def _check_tipo_cliente(raw: Mapping[str, Any]) -> str | None:
    if raw.get("tipoCliente") not in TIPOS_CLIENTE:
        return "tipoCliente inválido."
    return None


def _check_campos_cliente(raw: Mapping[str, Any]) -> str | None:
    for field, message in _CAMPOS_CLIENTE:
        if not clean(raw.get(field)):
            return message
    return None


def _check_endereco(raw: Mapping[str, Any]) -> str | None:
    endereco = _as_object(raw.get("enderDest"))
    if endereco is None:
        return "enderDest obrigatório."
    for field, message in _CAMPOS_ENDERECO:
        if not clean(endereco.get(field)):
            return message
    return None


def _check_itens_presentes(raw: Mapping[str, Any]) -> str | None:
    itens = raw.get("itens")
    if not isinstance(itens, list) or not itens:
        return "itens[] obrigatório (mín. 1 item)."
    return None


def _check_documento(raw: Mapping[str, Any]) -> str | None:
    tipo_cliente = raw["tipoCliente"]
    if is_documento_valido(tipo_cliente, raw.get("doc")):
        return None
    return "CPF inválido." if tipo_cliente == "PF" else "CNPJ inválido."


def _check_ind_ie_dest(raw: Mapping[str, Any]) -> str | None:
    ind = clean(raw.get("indIEDest"))
    if ind not in IND_IE_DEST_VALIDOS:
        return "indIEDest deve ser 1, 2 ou 9."
    if ind == IND_IE_CONTRIBUINTE and not clean(raw.get("IE")):
        return "IE obrigatória quando indIEDest=1 (contribuinte ICMS)."
    return None


# Ordem importa: cada check pode assumir que os anteriores passaram.
SUBMISSION_CHECKS: tuple[Check, ...] = (
    _check_tipo_cliente,
    _check_campos_cliente,
    _check_endereco,
    _check_itens_presentes,
    _check_documento,
    _check_ind_ie_dest,
)


def parse_quantidade(value: Any) -> int | float | None:
    """Converte qtd para número finito > 0; None se inválida.

    Valores inteiros são mantidos como int (2.0 → 2).
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        qtd = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(qtd) or qtd <= 0:
        return None
    return int(qtd) if qtd.is_integer() else qtd


def _parse_item(index: int, item: Any) -> ItemPedido | ValidationFailure:
    label = f"Item #{index}"
    item = _as_object(item)
    if item is None:
        return ValidationFailure(f"{label}: inválido.")
    sku = clean(item.get("sku"))
    if not sku:
        return ValidationFailure(f"{label}: sku obrigatório.")
    qtd = parse_quantidade(item.get("qtd"))
    if qtd is None:
        return ValidationFailure(f"{label}: qtd inválida.")
    return ItemPedido(sku=sku, qtd=qtd, variacao=clean(item.get("variacao")))


def _build_validado(raw: Mapping[str, Any], itens: list[ItemPedido]) -> PedidoValidado:
    tipo_cliente = raw["tipoCliente"]
    documento = only_digits(raw.get("doc"))
    endereco = raw["enderDest"]
    destinatario = Destinatario(
        tipo_cliente=tipo_cliente,
        x_nome=clean(raw.get("xNome")),
        cpf=documento if tipo_cliente == "PF" else None,
        cnpj=documento if tipo_cliente == "PJ" else None,
        ind_ie_dest=clean(raw.get("indIEDest")),
        ie=clean(raw.get("IE")) or None,
        email=clean(raw.get("email")),
        fone=clean(raw.get("fone")),
    )
    ender_dest = EnderecoDestino(
        cep=only_digits(endereco.get("CEP")),
        x_lgr=clean(endereco.get("xLgr")),
        nro=clean(endereco.get("nro")),
        x_cpl=clean(endereco.get("xCpl")),
        x_bairro=clean(endereco.get("xBairro")),
        x_mun=clean(endereco.get("xMun")),
        uf=clean(endereco.get("UF")).upper(),
    )
    return PedidoValidado(
        destinatario=destinatario,
        ender_dest=ender_dest,
        itens=tuple(itens),
        frete=clean(raw.get("frete")),
        obs=clean(raw.get("obs")),
    )


def validate_submission(raw: Any) -> PedidoValidado | ValidationFailure:
    """Valida e normaliza a submissão bruta.

    Args:
        raw: Corpo JSON já decodificado. Qualquer coisa que não seja objeto
            é tratada como objeto vazio.

    Returns:
        PedidoValidado normalizado ou ValidationFailure da primeira regra
        violada.
    """
    payload: Mapping[str, Any] = raw if isinstance(raw, Mapping) else {}

    for check in SUBMISSION_CHECKS:
        message = check(payload)
        if message is not None:
            return _reject(check, message)

    itens: list[ItemPedido] = []
    for index, item in enumerate(payload["itens"], start=1):
        parsed = _parse_item(index, item)
        if isinstance(parsed, ValidationFailure):
            return _reject(_parse_item, parsed.message)
        itens.append(parsed)

    return _build_validado(payload, itens)


def _reject(check: Callable[..., object], message: str) -> ValidationFailure:
    logger.info(
        "pedido_validation_failed",
        extra={"component": "pedido_validator", "rule": check.__name__.lstrip("_")},
    )
    return ValidationFailure(message)


__all__ = [
    "IND_IE_DEST_VALIDOS",
    "SUBMISSION_CHECKS",
    "TIPOS_CLIENTE",
    "ValidationFailure",
    "parse_quantidade",
    "validate_submission",
]

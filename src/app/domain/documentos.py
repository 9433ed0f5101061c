"""Validação de documentos fiscais brasileiros (CPF e CNPJ).

Implementa os algoritmos oficiais de dígito verificador. Funções puras,
sem IO: recebem o documento como veio do cliente (com ou sem máscara)
e retornam apenas bool.
"""

from __future__ import annotations

from typing import Literal

from utils.normalizers import only_digits

TipoCliente = Literal["PF", "PJ"]

CPF_LENGTH = 11
CNPJ_LENGTH = 14

_CNPJ_WEIGHTS_FIRST = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
_CNPJ_WEIGHTS_SECOND = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)


def _all_same_digit(digits: str) -> bool:
    return len(set(digits)) == 1


def _cpf_check_digit(digits: str, first_weight: int) -> int:
    total = sum(int(d) * (first_weight - i) for i, d in enumerate(digits))
    digit = (total * 10) % 11
    return 0 if digit == 10 else digit


def is_cpf(value: object) -> bool:
    """Valida CPF (pessoa física, 11 dígitos)."""
    cpf = only_digits(value)
    if len(cpf) != CPF_LENGTH or _all_same_digit(cpf):
        return False
    if _cpf_check_digit(cpf[:9], 10) != int(cpf[9]):
        return False
    return _cpf_check_digit(cpf[:10], 11) == int(cpf[10])


def _cnpj_check_digit(base: str) -> int:
    weights = _CNPJ_WEIGHTS_FIRST if len(base) == 12 else _CNPJ_WEIGHTS_SECOND
    total = sum(int(d) * w for d, w in zip(base, weights, strict=True))
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def is_cnpj(value: object) -> bool:
    """Valida CNPJ (pessoa jurídica, 14 dígitos)."""
    cnpj = only_digits(value)
    if len(cnpj) != CNPJ_LENGTH or _all_same_digit(cnpj):
        return False
    d1 = _cnpj_check_digit(cnpj[:12])
    d2 = _cnpj_check_digit(cnpj[:12] + str(d1))
    return int(cnpj[12]) == d1 and int(cnpj[13]) == d2


def is_documento_valido(tipo_cliente: str, value: object) -> bool:
    """Valida o documento conforme o tipo de cliente (PF → CPF, PJ → CNPJ)."""
    if tipo_cliente == "PF":
        return is_cpf(value)
    if tipo_cliente == "PJ":
        return is_cnpj(value)
    return False


__all__ = [
    "CNPJ_LENGTH",
    "CPF_LENGTH",
    "TipoCliente",
    "is_cnpj",
    "is_cpf",
    "is_documento_valido",
]

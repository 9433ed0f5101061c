"""Normalizadores de campos de entrada.

Funções totais usadas pela validação e pela canonicalização do pedido:
nunca levantam exceção, qualquer valor vira string.
"""

from __future__ import annotations

import re
from typing import Any

_NON_DIGITS = re.compile(r"[^0-9]")


def only_digits(value: Any = "") -> str:
    """Remove tudo que não for dígito decimal (ex.: CPF, CNPJ, CEP)."""
    if value is None:
        return ""
    return _NON_DIGITS.sub("", str(value))


def clean(value: Any = "") -> str:
    """Converte para string e remove espaços nas extremidades.

    None (campo ausente) vira string vazia.
    """
    if value is None:
        return ""
    return str(value).strip()


__all__ = ["clean", "only_digits"]

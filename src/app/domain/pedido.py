"""Modelos de domínio do pedido canônico.

Os nomes de campo no JSON seguem o vocabulário da NF-e usado pelo
formulário (xNome, enderDest, indIEDest...). Em Python os atributos são
snake_case com alias; serialize sempre com `by_alias=True`.

Todos os modelos são imutáveis: o Pedido é montado uma única vez pelo
canonicalizador e apenas lido depois disso.
"""

from __future__ import annotations

import math
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from app.domain.documentos import TipoCliente  # noqa: TC001 - usado em runtime pelo Pydantic

IndIEDest = Literal["1", "2", "9"]

IND_IE_CONTRIBUINTE = "1"


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")


class ItemPedido(_FrozenModel):
    """Item de linha do pedido."""

    sku: str = Field(..., min_length=1)
    qtd: int | float
    variacao: str = ""

    @field_validator("qtd")
    @classmethod
    def _check_qtd(cls, value: int | float) -> int | float:
        if isinstance(value, bool) or not math.isfinite(value) or value <= 0:
            raise ValueError("qtd deve ser um número finito maior que zero")
        return value


class EnderecoDestino(_FrozenModel):
    """Endereço de entrega (UF sempre em maiúsculas, CEP só dígitos)."""

    cep: str = Field(..., alias="CEP")
    x_lgr: str = Field(..., alias="xLgr", min_length=1)
    nro: str = Field(..., min_length=1)
    x_cpl: str = Field(default="", alias="xCpl")
    x_bairro: str = Field(..., alias="xBairro", min_length=1)
    x_mun: str = Field(..., alias="xMun", min_length=1)
    uf: str = Field(..., alias="UF", min_length=1)


class Destinatario(_FrozenModel):
    """Cliente do pedido.

    Exatamente um documento preenchido: CPF para PF, CNPJ para PJ.
    """

    tipo_cliente: TipoCliente = Field(..., alias="tipoCliente")
    x_nome: str = Field(..., alias="xNome", min_length=1)
    cpf: str | None = Field(default=None, alias="CPF")
    cnpj: str | None = Field(default=None, alias="CNPJ")
    ind_ie_dest: IndIEDest = Field(..., alias="indIEDest")
    ie: str | None = Field(default=None, alias="IE")
    email: str = Field(..., min_length=1)
    fone: str = Field(..., min_length=1)

    @model_validator(mode="after")
    def _check_documento(self) -> Destinatario:
        if self.tipo_cliente == "PF" and (not self.cpf or self.cnpj):
            raise ValueError("PF exige CPF e não aceita CNPJ")
        if self.tipo_cliente == "PJ" and (not self.cnpj or self.cpf):
            raise ValueError("PJ exige CNPJ e não aceita CPF")
        if self.ind_ie_dest == IND_IE_CONTRIBUINTE and not self.ie:
            raise ValueError("IE obrigatória quando indIEDest=1")
        return self

    @property
    def documento(self) -> str:
        """CPF ou CNPJ, conforme o tipo de cliente."""
        return (self.cpf if self.tipo_cliente == "PF" else self.cnpj) or ""


class Origem(_FrozenModel):
    """Local de origem fixo da operação (configurado por deploy)."""

    uf: str = Field(..., alias="UF")
    municipio: str


class PedidoValidado(_FrozenModel):
    """Submissão já validada e normalizada, ainda sem id/data/origem."""

    destinatario: Destinatario
    ender_dest: EnderecoDestino = Field(..., alias="enderDest")
    itens: tuple[ItemPedido, ...] = Field(..., min_length=1)
    frete: str = ""
    obs: str = ""


class Pedido(_FrozenModel):
    """Pedido canônico: persistido na planilha, no backup e no e-mail."""

    pedido_id: str = Field(..., alias="pedidoId")
    created_at: str = Field(..., alias="createdAt")
    origem: Origem
    destinatario: Destinatario
    ender_dest: EnderecoDestino = Field(..., alias="enderDest")
    itens: tuple[ItemPedido, ...] = Field(..., min_length=1)
    frete: str = ""
    obs: str = ""

    def to_json_dict(self) -> dict[str, object]:
        """Estrutura JSON do pedido (campos opcionais ausentes omitidos)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class PedidoAceito(_FrozenModel):
    """Resposta de sucesso devolvida ao cliente."""

    ok: Literal[True] = True
    pedido_id: str = Field(..., alias="pedidoId")


__all__ = [
    "IND_IE_CONTRIBUINTE",
    "Destinatario",
    "EnderecoDestino",
    "IndIEDest",
    "ItemPedido",
    "Origem",
    "Pedido",
    "PedidoAceito",
    "PedidoValidado",
]

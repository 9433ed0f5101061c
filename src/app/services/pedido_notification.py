"""Formatação do e-mail de novo pedido e da linha da planilha.

Funções puras: recebem o Pedido canônico e devolvem o que os destinos
externos precisam (linha de 10 células, assunto, corpo e anexo JSON).
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from app.protocols.mail_sender import MailAttachment, MailMessage

if TYPE_CHECKING:
    from app.domain.pedido import ItemPedido, Pedido
    from app.protocols.sheet_sink import SheetCell

EMPTY_PLACEHOLDER = "-"


def pedido_to_json(pedido: Pedido) -> str:
    """JSON indentado do pedido (mesmo conteúdo do backup em arquivo)."""
    return json.dumps(pedido.to_json_dict(), ensure_ascii=False, indent=2)


def pedido_filename(pedido_id: str) -> str:
    return f"pedido-{pedido_id}.json"


def format_itens_resumo(itens: tuple[ItemPedido, ...]) -> str:
    """Resumo em uma linha: "SKU1 (2), SKU2 (1)"."""
    return ", ".join(f"{item.sku} ({item.qtd})" for item in itens)


def build_sheet_row(pedido: Pedido) -> list[SheetCell]:
    """Linha da planilha, na ordem das colunas da aba de pedidos."""
    dest = pedido.destinatario
    endereco = pedido.ender_dest
    return [
        pedido.pedido_id,
        pedido.created_at,
        dest.x_nome,
        dest.email,
        dest.fone,
        endereco.x_mun,
        endereco.uf,
        format_itens_resumo(pedido.itens),
        pedido.frete,
        pedido.obs,
    ]


def build_subject(pedido: Pedido) -> str:
    return (
        f"NOVO PEDIDO {pedido.pedido_id} - {pedido.ender_dest.uf} - "
        f"{pedido.destinatario.x_nome}"
    )


def _format_item(item: ItemPedido) -> str:
    line = f"- SKU: {item.sku} | Qtd: {item.qtd}"
    if item.variacao:
        line += f" | Var: {item.variacao}"
    return line


def build_body(pedido: Pedido) -> str:
    """Corpo em texto puro com destinatário, endereço, itens, frete e obs."""
    dest = pedido.destinatario
    endereco = pedido.ender_dest
    complemento = f" - {endereco.x_cpl}" if endereco.x_cpl else ""
    itens = "\n".join(_format_item(item) for item in pedido.itens)
    lines = [
        "NOVO PEDIDO",
        f"ID: {pedido.pedido_id}",
        f"Data: {pedido.created_at}",
        "",
        "DESTINATÁRIO",
        f"- Tipo: {dest.tipo_cliente}",
        f"- Nome/Razão: {dest.x_nome}",
        f"- CPF/CNPJ: {dest.documento}",
        f"- indIEDest: {dest.ind_ie_dest}",
        f"- IE: {dest.ie or EMPTY_PLACEHOLDER}",
        f"- E-mail: {dest.email}",
        f"- WhatsApp: {dest.fone}",
        "",
        "ENDEREÇO",
        f"{endereco.x_lgr}, {endereco.nro}{complemento}",
        f"Bairro: {endereco.x_bairro}",
        f"{endereco.x_mun}/{endereco.uf} - CEP {endereco.cep}",
        "",
        "ITENS",
        itens,
        "",
        f"FRETE: {pedido.frete or EMPTY_PLACEHOLDER}",
        f"OBS: {pedido.obs or EMPTY_PLACEHOLDER}",
    ]
    return "\n".join(lines) + "\n"


def build_notification(pedido: Pedido, *, sender: str, to: str) -> MailMessage:
    """Monta o e-mail para o operador com o pedido em anexo."""
    attachment = MailAttachment(
        filename=pedido_filename(pedido.pedido_id),
        content=pedido_to_json(pedido).encode("utf-8"),
        content_type="application/json",
    )
    return MailMessage(
        sender=sender,
        to=to,
        reply_to=pedido.destinatario.email,
        subject=build_subject(pedido),
        text=build_body(pedido),
        attachments=(attachment,),
    )


__all__ = [
    "build_body",
    "build_notification",
    "build_sheet_row",
    "build_subject",
    "format_itens_resumo",
    "pedido_filename",
    "pedido_to_json",
]

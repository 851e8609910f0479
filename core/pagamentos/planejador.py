from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Iterable, Optional, Union

from core.entities import NovaTransacao, PagamentoProgramado, Transacao
from core.enums import ERecorrencia, ETipoTransacao
from core.shared.seguranca import gerar_id_seguro

_logger = logging.getLogger("financeiro.core.pagamentos")

GeradorId = Callable[[str], str]


def _ordenados(pagamentos: Iterable[PagamentoProgramado]) -> list[PagamentoProgramado]:
    return sorted(pagamentos, key=lambda p: p.data_vencimento)


def planejar_pagamento(
    transacao: Union[Transacao, NovaTransacao],
    recorrencia: Union[str, ERecorrencia],
    gerar_id: GeradorId = gerar_id_seguro,
) -> Optional[PagamentoProgramado]:
    """Cria o pagamento programado de uma saída recorrente.

    Retorna None para entradas ou recorrência "nenhuma". Gera exatamente um
    registro, com vencimento na data do lançamento; ocorrências futuras não
    são geradas.
    """
    recorrencia_enum = ERecorrencia(recorrencia)
    if transacao.tipo is not ETipoTransacao.SAIDA or recorrencia_enum is ERecorrencia.NENHUMA:
        return None

    pagamento = PagamentoProgramado(
        id=gerar_id("pagamento"),
        descricao=transacao.descricao,
        valor=transacao.valor,
        data_vencimento=transacao.data,
        pago=False,
        recorrencia=recorrencia_enum,
    )
    _logger.debug(
        "Planned scheduled payment",
        extra={"payment_id": pagamento.id, "recurrence": recorrencia_enum.value},
    )
    return pagamento


def inserir_pagamento(
    pagamentos: Iterable[PagamentoProgramado], novo: PagamentoProgramado
) -> list[PagamentoProgramado]:
    return _ordenados([*pagamentos, novo])


def marcar_pago(
    pagamentos: Iterable[PagamentoProgramado], pagamento_id: str, pago: bool
) -> list[PagamentoProgramado]:
    return [p.com_pago(pago) if p.id == pagamento_id else p for p in pagamentos]


def remover_pagamento(
    pagamentos: Iterable[PagamentoProgramado], pagamento_id: str
) -> list[PagamentoProgramado]:
    return _ordenados(p for p in pagamentos if p.id != pagamento_id)


def dias_para_vencer(
    pagamento: PagamentoProgramado, referencia: Optional[datetime] = None
) -> Optional[int]:
    """Dias inteiros até o vencimento (truncado para zero); None se já pago."""
    if pagamento.pago:
        return None
    agora = referencia if referencia is not None else datetime.now()
    return int((pagamento.data_vencimento - agora).total_seconds() / 86400)

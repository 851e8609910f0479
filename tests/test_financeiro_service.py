import asyncio
import itertools
import logging
from datetime import datetime
from decimal import Decimal

import pytest

from application.financeiro.command import FormularioTransacao
from application.financeiro.handlers import (
    MENSAGEM_ERRO_OPERACIONAL,
    MENSAGEM_SEM_PERMISSAO,
    MENSAGEM_SEM_PERMISSAO_EXCLUSAO,
    FinanceiroService,
)
from application.financeiro.query import FinanceiroQuery
from application.shared.response import Response
from core.agregacao import agregar_por_mes
from core.confirmacao import Ocioso
from core.entities import PagamentoProgramado
from core.enums import ERecorrencia, ETipoTransacao
from core.filtros import FiltroTransacoes
from core.validacao import validar_campo_numero
from infrastructure.permissoes import PermissoesEstaticas
from infrastructure.repository.ledger.repository import LedgerEmMemoria
from infrastructure.repository.pagamentos.repository import AgendaPagamentosEmMemoria


class _LedgerIndisponivel(LedgerEmMemoria):
    def adicionar_transacao(self, nova):
        raise RuntimeError("armazenamento indisponível")


class _AgendaIndisponivel(AgendaPagamentosEmMemoria):
    def substituir(self, pagamentos):
        raise RuntimeError("agenda indisponível")


def _servico(escopos=("financeiro.editar",), store=None, agenda=None, **kwargs):
    store = store if store is not None else LedgerEmMemoria()
    agenda = agenda if agenda is not None else AgendaPagamentosEmMemoria()
    contador = itertools.count(1)
    servico = FinanceiroService(
        store=store,
        agenda=agenda,
        permissoes=PermissoesEstaticas(escopos),
        gerar_id=lambda prefixo: f"{prefixo}-{next(contador)}",
        **kwargs,
    )
    return servico, store, agenda


def _submeter(servico, tipo, **campos):
    return asyncio.run(servico.submeter(tipo, FormularioTransacao(**campos)))


# ----------------- Submissão -----------------
def test_entrada_valida_atualiza_saldo_e_grafico():
    servico, store, agenda = _servico()

    resposta = _submeter(servico, "entrada", valor="150.00", data="2024-03-05", descricao="Venda balcão")

    assert resposta.code == 201
    assert resposta.success is True
    assert resposta.message == "Entrada adicionada com sucesso!"
    assert resposta.data["pagamento"] is None
    assert store.balanco.saldo_atual == Decimal("150.00")
    assert store.balanco.total_entradas == Decimal("150.00")
    meses = {r.name: r for r in agregar_por_mes(store.transacoes, ano_atual=2024)}
    assert meses["mar 2024"].entrada == Decimal("150.00")
    assert agenda.listar() == []


def test_saida_mensal_gera_pagamento_programado():
    servico, store, agenda = _servico()

    resposta = _submeter(
        servico,
        ETipoTransacao.SAIDA,
        valor="40",
        data="2024-03-05",
        descricao="Compra gelo",
        categoria="Compras",
        recorrencia=ERecorrencia.MENSAL,
    )

    assert resposta.code == 201
    assert resposta.message == "Saída adicionada com sucesso!"
    assert store.balanco.saldo_atual == Decimal("-40.00")
    [pagamento] = agenda.listar()
    assert pagamento.id == "pagamento-1"
    assert pagamento.descricao == "Compra gelo"
    assert pagamento.valor == Decimal("40.00")
    assert pagamento.data_vencimento == datetime(2024, 3, 5)
    assert pagamento.pago is False
    assert pagamento.recorrencia is ERecorrencia.MENSAL
    assert resposta.data["pagamento"]["id"] == "pagamento-1"


def test_entrada_recorrente_nao_gera_pagamento():
    servico, _, agenda = _servico()

    _submeter(servico, "entrada", valor="10", data="2024-03-05", descricao="Venda mensal", recorrencia="mensal")

    assert agenda.listar() == []


def test_agenda_mantida_em_ordem_de_vencimento():
    servico, _, agenda = _servico()

    _submeter(servico, "saida", valor="10", data="2024-03-20", descricao="Internet loja", recorrencia="mensal")
    _submeter(servico, "saida", valor="20", data="2024-03-05", descricao="Aluguel loja", recorrencia="mensal")

    assert [p.descricao for p in agenda.listar()] == ["Aluguel loja", "Internet loja"]


def test_agenda_em_memoria_ordena_na_entrada():
    def _pagamento(identificador, dia):
        return PagamentoProgramado(
            id=identificador,
            descricao="Aluguel loja",
            valor=Decimal("1200.00"),
            data_vencimento=datetime(2024, 3, dia),
            recorrencia=ERecorrencia.MENSAL,
        )

    agenda = AgendaPagamentosEmMemoria([_pagamento("p3", 20), _pagamento("p1", 5), _pagamento("p2", 10)])
    assert [p.id for p in agenda.listar()] == ["p1", "p2", "p3"]

    agenda.substituir([_pagamento("p5", 28), _pagamento("p4", 1)])
    assert [p.id for p in agenda.listar()] == ["p4", "p5"]


def test_categoria_padrao_e_metodo_de_pagamento():
    servico, store, _ = _servico()

    _submeter(servico, "saida", valor="10", data="2024-03-05", descricao="Compra gelo", observacao="Pix")

    [transacao] = store.transacoes
    assert transacao.categoria == "Sem categoria"
    assert transacao.observacao == "Pix"
    assert transacao.metodo_pagamento == "Pix"


def test_sem_permissao_retorna_403_antes_da_validacao():
    servico, store, _ = _servico(escopos=())

    resposta = _submeter(servico, "entrada", valor="", descricao="")

    assert resposta.code == 403
    assert resposta.success is False
    assert resposta.message == MENSAGEM_SEM_PERMISSAO
    assert store.transacoes == ()


def test_curinga_concede_permissao():
    servico, store, _ = _servico(escopos=("*",))

    assert _submeter(servico, "entrada", valor="1", data="2024-03-05", descricao="Venda avulsa").code == 201
    assert len(store.transacoes) == 1


@pytest.mark.parametrize(
    "campos, mensagem",
    [
        ({"valor": "0", "descricao": "Venda balcão"}, "O campo Valor deve ser maior ou igual a 0.01"),
        ({"valor": "", "descricao": ""}, "O campo Valor é obrigatório"),
        ({"valor": "abc", "descricao": "Venda balcão"}, "O campo Valor deve ser um número válido"),
        ({"valor": "10", "descricao": "ab"}, "O campo Descrição deve ter pelo menos 3 caracteres"),
        ({"valor": "10", "descricao": "Venda", "data": ""}, "O campo Data é obrigatório"),
        (
            {"valor": "10", "descricao": "Venda", "observacao": "x" * 201},
            "O campo Observação deve ter no máximo 200 caracteres",
        ),
    ],
)
def test_validacao_retorna_422_com_primeira_mensagem(campos, mensagem):
    servico, store, agenda = _servico()

    resposta = _submeter(servico, "saida", recorrencia="mensal", **campos)

    assert resposta.code == 422
    assert resposta.message == mensagem
    assert store.transacoes == ()
    assert agenda.listar() == []


def test_regra_de_dominio_retorna_422():
    servico, store, _ = _servico()

    # Passa no validador (4 caracteres) mas a descrição normalizada tem 1
    resposta = _submeter(servico, "entrada", valor="10", data="2024-03-05", descricao="a   ")

    assert resposta.code == 422
    assert "Descrição" in resposta.message
    assert store.transacoes == ()


def test_tipo_invalido_retorna_422():
    servico, store, _ = _servico()

    resposta = _submeter(servico, "transferencia", valor="10", data="2024-03-05", descricao="Venda balcão")

    assert resposta.code == 422
    assert store.transacoes == ()


def test_valor_alem_da_precisao_decimal_retorna_422():
    servico, store, agenda = _servico()
    valor = "1" + "0" * 27
    assert validar_campo_numero(valor, "Valor", min=0.01).is_valid

    resposta = _submeter(
        servico, "saida", valor=valor, data="2024-03-05", descricao="Venda grande", recorrencia="mensal"
    )

    assert resposta.code == 422
    assert resposta.success is False
    assert store.transacoes == ()
    assert agenda.listar() == []
    assert not servico.em_submissao


def test_submissao_concorrente_e_rejeitada():
    servico, store, _ = _servico(atraso_persistencia=0.01)

    async def _duas_submissoes():
        return await asyncio.gather(
            servico.submeter("entrada", FormularioTransacao(valor="10", data="2024-03-05", descricao="Primeira")),
            servico.submeter("entrada", FormularioTransacao(valor="20", data="2024-03-05", descricao="Segunda")),
        )

    primeira, segunda = asyncio.run(_duas_submissoes())

    assert primeira.code == 201
    assert segunda.code == 409
    assert [t.descricao for t in store.transacoes] == ["Primeira"]
    assert servico.em_submissao is False


def test_falha_no_armazenamento_retorna_500_sem_efeitos(caplog):
    servico, store, agenda = _servico(store=_LedgerIndisponivel())

    with caplog.at_level(logging.ERROR, logger="financeiro"):
        resposta = _submeter(
            servico, "saida", valor="40", data="2024-03-05", descricao="Compra gelo", recorrencia="mensal"
        )

    assert resposta.code == 500
    assert resposta.message == MENSAGEM_ERRO_OPERACIONAL
    assert store.transacoes == ()
    assert agenda.listar() == []
    assert servico.em_submissao is False
    assert any(r.levelno == logging.ERROR for r in caplog.records)


def test_falha_na_agenda_desfaz_lancamento():
    servico, store, _ = _servico(agenda=_AgendaIndisponivel())

    resposta = _submeter(
        servico, "saida", valor="40", data="2024-03-05", descricao="Compra gelo", recorrencia="mensal"
    )

    assert resposta.code == 500
    assert store.transacoes == ()
    assert store.balanco.saldo_atual == Decimal("0")


def test_nova_submissao_apos_falha_e_aceita():
    servico, store, _ = _servico()
    servico.store = _LedgerIndisponivel()
    assert _submeter(servico, "entrada", valor="10", data="2024-03-05", descricao="Venda balcão").code == 500

    servico.store = store
    assert _submeter(servico, "entrada", valor="10", data="2024-03-05", descricao="Venda balcão").code == 201


# ----------------- Exclusões -----------------
def test_exclusao_exige_confirmacao():
    servico, store, _ = _servico()
    _submeter(servico, "entrada", valor="150", data="2024-03-05", descricao="Venda balcão")
    [transacao] = store.transacoes

    assert servico.solicitar_remocao_transacao(transacao.id).code == 202
    assert store.transacoes == (transacao,)

    servico.cancelar()
    assert store.transacoes == (transacao,)
    assert servico.confirmacao.estado == Ocioso()

    servico.solicitar_remocao_transacao(transacao.id)
    resposta = servico.confirmar()

    assert resposta.success is True
    assert store.transacoes == ()
    assert store.balanco.saldo_atual == Decimal("0")


def test_exclusao_de_pagamento_programado():
    servico, _, agenda = _servico()
    for dia in ("05", "10", "20"):
        _submeter(servico, "saida", valor="10", data=f"2024-03-{dia}", descricao=f"Conta {dia}", recorrencia="mensal")
    alvo = agenda.listar()[1]

    servico.solicitar_remocao_pagamento(alvo.id)
    assert len(agenda.listar()) == 3

    servico.confirmar()
    assert [p.descricao for p in agenda.listar()] == ["Conta 05", "Conta 20"]


def test_cancelar_exclusao_de_pagamento_mantem_agenda():
    servico, _, agenda = _servico()
    for dia in ("05", "10"):
        _submeter(servico, "saida", valor="10", data=f"2024-03-{dia}", descricao=f"Conta {dia}", recorrencia="mensal")
    antes = agenda.listar()

    assert servico.solicitar_remocao_pagamento(antes[0].id).code == 202
    assert servico.cancelar().success is True

    assert agenda.listar() == antes
    assert servico.confirmacao.estado == Ocioso()
    assert servico.confirmar().code == 409


def test_exclusao_de_transacao_inexistente_retorna_404():
    servico, store, _ = _servico()
    _submeter(servico, "entrada", valor="150", data="2024-03-05", descricao="Venda balcão")

    resposta = servico.solicitar_remocao_transacao("nao-existe")

    assert resposta.code == 404
    assert resposta.success is False
    assert not servico.confirmacao.pendente
    assert len(store.transacoes) == 1


def test_exclusao_de_pagamento_inexistente_retorna_404():
    servico, _, agenda = _servico()
    _submeter(servico, "saida", valor="10", data="2024-03-05", descricao="Conta luz", recorrencia="mensal")

    resposta = servico.solicitar_remocao_pagamento("nao-existe")

    assert resposta.code == 404
    assert resposta.message == "Pagamento programado não encontrado"
    assert not servico.confirmacao.pendente
    assert len(agenda.listar()) == 1


def test_confirmar_sem_pendencia_retorna_409():
    servico, _, _ = _servico()
    assert servico.confirmar().code == 409


def test_exclusao_sem_permissao():
    servico, _, _ = _servico(escopos=())

    resposta = servico.solicitar_remocao_transacao("tx-1")

    assert resposta.code == 403
    assert resposta.message == MENSAGEM_SEM_PERMISSAO_EXCLUSAO
    assert not servico.confirmacao.pendente


def test_falha_na_acao_confirmada_retorna_500():
    pagamento = PagamentoProgramado(
        id="pagamento-1",
        descricao="Aluguel loja",
        valor=Decimal("1200.00"),
        data_vencimento=datetime(2024, 3, 10),
        recorrencia=ERecorrencia.MENSAL,
    )
    servico, store, agenda = _servico(agenda=_AgendaIndisponivel([pagamento]))

    servico.solicitar_remocao_pagamento("pagamento-1")

    assert servico.confirmar().code == 500
    assert not servico.confirmacao.pendente


# ----------------- Agenda e edição -----------------
def test_alternar_pago():
    servico, _, agenda = _servico()
    _submeter(servico, "saida", valor="10", data="2024-03-05", descricao="Conta luz", recorrencia="mensal")
    _submeter(servico, "saida", valor="20", data="2024-03-06", descricao="Conta água", recorrencia="mensal")
    primeiro, segundo = agenda.listar()

    assert servico.alternar_pago(primeiro.id, True).success is True
    assert [p.pago for p in servico.pagamentos] == [True, False]
    assert servico.pagamentos[1] == segundo

    assert servico.alternar_pago("inexistente", True).code == 404


def test_formulario_de_edicao():
    servico, store, _ = _servico()
    _submeter(
        servico,
        "saida",
        valor="40",
        data="2024-03-05",
        descricao="Compra gelo",
        categoria="Compras",
        recorrencia="mensal",
    )
    [transacao] = store.transacoes

    formulario = servico.formulario_de_transacao(transacao.id)

    assert formulario.valor == "40.00"
    assert formulario.data == "2024-03-05"
    assert formulario.descricao == "Compra gelo"
    assert formulario.categoria == "Compras"
    assert formulario.recorrencia is ERecorrencia.NENHUMA
    assert servico.formulario_de_transacao("inexistente") is None


def test_formulario_aceita_numeros_e_datas():
    formulario = FormularioTransacao(valor=150, data=datetime(2024, 3, 5).date(), descricao=None)

    assert formulario.valor == "150"
    assert formulario.data == "2024-03-05"
    assert formulario.descricao == ""


# ----------------- Consultas -----------------
def test_consultas_derivadas():
    servico, store, agenda = _servico()
    _submeter(servico, "entrada", valor="150", data="2024-03-05", descricao="Venda balcão", categoria="Vendas")
    _submeter(servico, "saida", valor="40", data="2024-03-10", descricao="Compra gelo", recorrencia="mensal")
    consulta = FinanceiroQuery(store=store, agenda=agenda)

    assert [t.descricao for t in consulta.transacoes_filtradas(FiltroTransacoes(categoria="vendas"))] == [
        "Venda balcão"
    ]
    graficos = consulta.graficos(ano_atual=2024)
    assert {r.name: r.saida for r in graficos.por_mes}["mar 2024"] == Decimal("40.00")
    assert consulta.balanco().saldo_atual == Decimal("110.00")
    assert consulta.tabela_mensal(ano_atual=2024)["saldo"].sum() == 110.0
    [(pagamento, dias)] = consulta.pagamentos_com_prazo(datetime(2024, 3, 5))
    assert dias == 5


def test_consulta_sem_agenda():
    assert FinanceiroQuery(store=LedgerEmMemoria()).pagamentos_com_prazo() == []


# ----------------- Response -----------------
def test_response_falha_exige_codigo_de_erro():
    with pytest.raises(ValueError):
        Response.falha("x", code=200)
    assert Response(code=204).success is True
    assert Response.falha("x", code=422).to_dict()["success"] is False

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Optional, Union

from core.confirmacao import FluxoConfirmacao
from core.entities import CATEGORIA_PADRAO, NovaTransacao, PagamentoProgramado, Transacao
from core.enums import ETipoTransacao
from core.pagamentos import inserir_pagamento, marcar_pago, planejar_pagamento, remover_pagamento
from core.pagamentos.planejador import GeradorId
from core.shared.seguranca import gerar_id_seguro
from core.validacao import (
    ResultadoValidacao,
    validar_campo_data,
    validar_campo_numero,
    validar_campo_texto,
    validar_formulario,
)
from core.value_object import TipoTransacao
from application.shared.contexto_operacao import generate_operation_id, set_operation_id
from application.shared.response import (
    CONFLITO,
    ERRO_OPERACIONAL,
    INVALIDO,
    NAO_ENCONTRADO,
    SEM_PERMISSAO,
    Response,
)
from .command import FormularioTransacao
from .interface import AgendaPagamentosPort, LedgerStorePort, PermissaoPort


_logger = logging.getLogger("financeiro.application.financeiro")

MENSAGEM_SEM_PERMISSAO = "Você não tem permissão para adicionar transações"
MENSAGEM_SEM_PERMISSAO_EXCLUSAO = "Você não tem permissão para excluir registros"
MENSAGEM_SUBMISSAO_EM_ANDAMENTO = "Aguarde: já existe um lançamento sendo salvo"
MENSAGEM_ERRO_OPERACIONAL = "Erro ao adicionar transação, tente novamente"


@dataclass(slots=True)
class FinanceiroService:
    """Caso de uso do livro-caixa: submissão, exclusões confirmadas e agenda.

    Fluxo da submissão: permissão -> validação -> persistência (simulada)
    -> Ledger Store -> pagamento programado. Nenhuma exceção atravessa esta
    fronteira; todo resultado volta como `Response`.
    """

    store: LedgerStorePort
    agenda: AgendaPagamentosPort
    permissoes: PermissaoPort
    atraso_persistencia: float = 0.0
    escopo_edicao: str = "financeiro.editar"
    categoria_padrao: str = CATEGORIA_PADRAO
    gerar_id: GeradorId = gerar_id_seguro
    confirmacao: FluxoConfirmacao = field(default_factory=FluxoConfirmacao)
    em_submissao: bool = field(default=False, init=False)

    # ----------------- Submissão -----------------
    async def submeter(
        self, tipo: Union[str, ETipoTransacao], formulario: FormularioTransacao
    ) -> Response:
        set_operation_id(generate_operation_id())
        try:
            return await self._submeter(tipo, formulario)
        finally:
            set_operation_id(None)

    async def _submeter(
        self, tipo: Union[str, ETipoTransacao], formulario: FormularioTransacao
    ) -> Response:
        if not self.permissoes.has_permission(self.escopo_edicao):
            _logger.warning("Submission denied by permission gate", extra={"scope": self.escopo_edicao})
            return Response.falha(MENSAGEM_SEM_PERMISSAO, code=SEM_PERMISSAO)

        if self.em_submissao:
            _logger.info("Submission rejected while another one is in flight")
            return Response.falha(MENSAGEM_SUBMISSAO_EM_ANDAMENTO, code=CONFLITO)

        validacao = self.validar(formulario)
        if not validacao.is_valid:
            _logger.info("Form rejected by validation", extra={"reason": validacao.message})
            return Response.falha(validacao.message, code=INVALIDO)

        try:
            tipo_vo = TipoTransacao.criar_de_nome(tipo)
            nova = self._montar_transacao(tipo_vo, formulario)
        except ValueError as exc:
            _logger.info("Form rejected by domain rules", extra={"reason": str(exc)})
            return Response.falha(str(exc), code=INVALIDO)

        self.em_submissao = True
        transacao: Optional[Transacao] = None
        try:
            await self._persistir()
            pagamento = planejar_pagamento(nova, formulario.recorrencia, self.gerar_id)
            agenda_atualizada = (
                inserir_pagamento(self.agenda.listar(), pagamento) if pagamento is not None else None
            )
            transacao = self.store.adicionar_transacao(nova)
            if agenda_atualizada is not None:
                self.agenda.substituir(agenda_atualizada)
        except Exception:
            _logger.exception("Failed to add transaction", extra={"kind": tipo_vo.como_enum().value})
            if transacao is not None:
                # Compensação: nada fica gravado pela metade
                self.store.remover_transacao(transacao.id)
            return Response.falha(MENSAGEM_ERRO_OPERACIONAL, code=ERRO_OPERACIONAL)
        finally:
            self.em_submissao = False

        _logger.info(
            "Transaction added",
            extra={
                "transaction_id": transacao.id,
                "kind": transacao.tipo.value,
                "scheduled_payment_id": pagamento.id if pagamento else None,
            },
        )
        return Response.sucesso(
            data={
                "transacao": transacao.como_registro(),
                "pagamento": pagamento.to_dict() if pagamento else None,
            },
            message=f"{tipo_vo.rotulo()} adicionada com sucesso!",
            code=201,
        )

    def validar(self, formulario: FormularioTransacao) -> ResultadoValidacao:
        return validar_formulario(
            [
                validar_campo_numero(formulario.valor, "Valor", required=True, min=0.01),
                validar_campo_data(formulario.data, "Data", required=True),
                validar_campo_texto(
                    formulario.descricao, "Descrição", required=True, min_length=3, max_length=100
                ),
                validar_campo_texto(formulario.observacao, "Observação", required=False, max_length=200),
            ]
        )

    def _montar_transacao(self, tipo: TipoTransacao, formulario: FormularioTransacao) -> NovaTransacao:
        return NovaTransacao.criar(
            tipo=tipo,
            valor=formulario.valor,
            data=formulario.data,
            descricao=formulario.descricao,
            categoria=formulario.categoria.strip() or self.categoria_padrao,
            observacao=formulario.observacao,
            metodo_pagamento=formulario.observacao or None,
        )

    async def _persistir(self) -> None:
        # Único ponto de suspensão da submissão
        await asyncio.sleep(self.atraso_persistencia)

    # ----------------- Exclusões (duas fases) -----------------
    def solicitar_remocao_transacao(self, transacao_id: str) -> Response:
        if not self.permissoes.has_permission(self.escopo_edicao):
            return Response.falha(MENSAGEM_SEM_PERMISSAO_EXCLUSAO, code=SEM_PERMISSAO)
        if not any(t.id == transacao_id for t in self.store.transacoes):
            return Response.falha("Transação não encontrada", code=NAO_ENCONTRADO)
        self.confirmacao.solicitar(
            "Excluir transação",
            "Tem certeza que deseja excluir esta transação?",
            transacao_id,
            lambda: self._remover_transacao(transacao_id),
        )
        return Response.sucesso(data={"item_id": transacao_id}, message="Confirme a exclusão", code=202)

    def solicitar_remocao_pagamento(self, pagamento_id: str) -> Response:
        if not self.permissoes.has_permission(self.escopo_edicao):
            return Response.falha(MENSAGEM_SEM_PERMISSAO_EXCLUSAO, code=SEM_PERMISSAO)
        if not any(p.id == pagamento_id for p in self.agenda.listar()):
            return Response.falha("Pagamento programado não encontrado", code=NAO_ENCONTRADO)
        self.confirmacao.solicitar(
            "Excluir pagamento programado",
            "Tem certeza que deseja excluir este pagamento programado?",
            pagamento_id,
            lambda: self._remover_pagamento(pagamento_id),
        )
        return Response.sucesso(data={"item_id": pagamento_id}, message="Confirme a exclusão", code=202)

    def confirmar(self) -> Response:
        if not self.confirmacao.pendente:
            return Response.falha("Nenhuma ação aguardando confirmação", code=CONFLITO)
        try:
            return self.confirmacao.confirmar()
        except Exception:
            _logger.exception("Confirmed action failed")
            return Response.falha("Erro ao excluir, tente novamente", code=ERRO_OPERACIONAL)

    def cancelar(self) -> Response:
        self.confirmacao.cancelar()
        return Response.sucesso(message="Exclusão cancelada")

    def _remover_transacao(self, transacao_id: str) -> Response:
        self.store.remover_transacao(transacao_id)
        return Response.sucesso(data={"item_id": transacao_id}, message="Transação excluída com sucesso")

    def _remover_pagamento(self, pagamento_id: str) -> Response:
        self.agenda.substituir(remover_pagamento(self.agenda.listar(), pagamento_id))
        _logger.info("Scheduled payment removed", extra={"payment_id": pagamento_id})
        return Response.sucesso(
            data={"item_id": pagamento_id}, message="Pagamento programado excluído com sucesso"
        )

    # ----------------- Agenda -----------------
    @property
    def pagamentos(self) -> list[PagamentoProgramado]:
        return self.agenda.listar()

    def alternar_pago(self, pagamento_id: str, pago: bool) -> Response:
        if not self.permissoes.has_permission(self.escopo_edicao):
            return Response.falha(MENSAGEM_SEM_PERMISSAO, code=SEM_PERMISSAO)
        atuais = self.agenda.listar()
        if not any(p.id == pagamento_id for p in atuais):
            return Response.falha("Pagamento programado não encontrado", code=NAO_ENCONTRADO)
        self.agenda.substituir(marcar_pago(atuais, pagamento_id, pago))
        _logger.info("Scheduled payment toggled", extra={"payment_id": pagamento_id, "paid": bool(pago)})
        return Response.sucesso(data={"item_id": pagamento_id, "pago": bool(pago)})

    # ----------------- Edição -----------------
    def formulario_de_transacao(self, transacao_id: str) -> Optional[FormularioTransacao]:
        """Formulário preenchido para reenviar um lançamento (edição = nova submissão)."""
        for transacao in self.store.transacoes:
            if transacao.id == transacao_id:
                return FormularioTransacao.de_transacao(transacao)
        return None

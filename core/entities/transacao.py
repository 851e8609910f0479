from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Any, ClassVar, Optional, Union

from core.enums import ETipoTransacao
from core.shared.value_objects.normalizar_valor import ValorBruto
from core.value_object import DataLancamento, Descricao, TipoTransacao, Valor

CATEGORIA_PADRAO = "Sem categoria"


def _coagir_campos(
    tipo: Union[str, ETipoTransacao, TipoTransacao],
    valor: Union[ValorBruto, Valor],
    data: Union[str, date, datetime, DataLancamento],
    descricao: Union[str, Descricao],
    categoria: Optional[str],
    observacao: Optional[str],
    metodo_pagamento: Optional[str],
    tamanho_maximo_observacao: int,
) -> dict[str, Any]:
    tipo_vo = tipo if isinstance(tipo, TipoTransacao) else TipoTransacao.criar_de_nome(tipo)
    valor_vo = valor if isinstance(valor, Valor) else Valor.criar_de_bruto(valor)
    data_vo = data if isinstance(data, DataLancamento) else DataLancamento.criar(data)
    descricao_vo = (
        descricao if isinstance(descricao, Descricao) else Descricao.criar_de_texto(descricao)
    )

    observacao_limpa = (observacao or "").strip() or None
    if observacao_limpa is not None and len(observacao_limpa) > tamanho_maximo_observacao:
        raise ValueError(
            f"Observação deve ter no máximo {tamanho_maximo_observacao} caracteres."
        )

    return {
        "tipo": tipo_vo.como_enum(),
        "valor": valor_vo.valor,
        "data": data_vo.as_datetime(),
        "descricao": descricao_vo.como_texto(),
        "categoria": (categoria or "").strip() or CATEGORIA_PADRAO,
        "observacao": observacao_limpa,
        "metodo_pagamento": (metodo_pagamento or "").strip() or None,
    }


@dataclass(frozen=True, slots=True)
class NovaTransacao:
    """Lançamento validado, ainda sem identificador (entrada do Ledger Store).

    Campos já normalizados pelos Value Objects do domínio; `valor` é sempre
    positivo e a descrição tem entre 3 e 100 caracteres.
    """

    tipo: ETipoTransacao
    valor: Decimal
    data: datetime
    descricao: str
    categoria: str = CATEGORIA_PADRAO
    observacao: Optional[str] = None
    metodo_pagamento: Optional[str] = None

    TAMANHO_MAXIMO_OBSERVACAO: ClassVar[int] = 200

    @classmethod
    def criar(
        cls,
        *,
        tipo: Union[str, ETipoTransacao, TipoTransacao],
        valor: Union[ValorBruto, Valor],
        data: Union[str, date, datetime, DataLancamento],
        descricao: Union[str, Descricao],
        categoria: Optional[str] = None,
        observacao: Optional[str] = None,
        metodo_pagamento: Optional[str] = None,
    ) -> "NovaTransacao":
        return cls(
            **_coagir_campos(
                tipo,
                valor,
                data,
                descricao,
                categoria,
                observacao,
                metodo_pagamento,
                cls.TAMANHO_MAXIMO_OBSERVACAO,
            )
        )


@dataclass(frozen=True, slots=True)
class Transacao:
    """Entidade de domínio imutável para um lançamento do livro-caixa.

    Edições são modeladas como uma nova submissão, nunca como mutação.
    """

    id: str
    tipo: ETipoTransacao
    valor: Decimal
    data: datetime
    descricao: str
    categoria: str = CATEGORIA_PADRAO
    observacao: Optional[str] = None
    metodo_pagamento: Optional[str] = None

    # Fábrica a partir do payload validado
    @classmethod
    def criar(cls, identificador: str, nova: NovaTransacao) -> "Transacao":
        if not identificador:
            raise ValueError("Identificador da transação não pode ser vazio.")
        return cls(
            id=identificador,
            tipo=nova.tipo,
            valor=nova.valor,
            data=nova.data,
            descricao=nova.descricao,
            categoria=nova.categoria,
            observacao=nova.observacao,
            metodo_pagamento=nova.metodo_pagamento,
        )

    # Reconstituir (leitura de dados brutos já persistidos)
    @classmethod
    def reconstituir(
        cls,
        identificador: str,
        *,
        tipo: Union[str, ETipoTransacao],
        valor: ValorBruto,
        data: Union[str, date, datetime],
        descricao: str,
        categoria: Optional[str] = None,
        observacao: Optional[str] = None,
        metodo_pagamento: Optional[str] = None,
    ) -> "Transacao":
        nova = NovaTransacao.criar(
            tipo=tipo,
            valor=valor,
            data=data,
            descricao=descricao,
            categoria=categoria,
            observacao=observacao,
            metodo_pagamento=metodo_pagamento,
        )
        return cls.criar(identificador, nova)

    # Conveniências semânticas
    def e_entrada(self) -> bool:
        return self.tipo is ETipoTransacao.ENTRADA

    def e_saida(self) -> bool:
        return self.tipo is ETipoTransacao.SAIDA

    @property
    def valor_com_sinal(self) -> Decimal:
        """Contribuição do lançamento para o saldo (+entrada, -saída)."""
        return self.valor if self.e_entrada() else -self.valor

    def como_registro(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "tipo": self.tipo.value,
            "valor": self.valor,
            "data": self.data.isoformat(),
            "descricao": self.descricao,
            "categoria": self.categoria,
            "observacao": self.observacao,
            "metodo_pagamento": self.metodo_pagamento,
        }

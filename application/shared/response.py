from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, model_validator

# Códigos usados pelos casos de uso do livro-caixa
SEM_PERMISSAO = 403
NAO_ENCONTRADO = 404
CONFLITO = 409
INVALIDO = 422
ERRO_OPERACIONAL = 500


class Response(BaseModel):
    """Resultado de um caso de uso do livro-caixa.

    Nenhuma exceção atravessa a camada de aplicação: permissão negada (403),
    item inexistente (404), submissão concorrente (409), formulário inválido
    (422) e falha operacional (500) voltam como `Response` com `success=False`.
    """

    code: int = Field(default=200, ge=100, le=599, description="Código no estilo HTTP.")
    success: Optional[bool] = Field(default=None, description="Derivado de `code` quando omitido.")
    message: str = Field(default="", description="Mensagem exibida ao usuário.")
    data: Any = Field(default=None)

    @model_validator(mode="after")
    def _derivar_sucesso(self) -> "Response":
        esperado = 200 <= self.code < 300
        if self.success is None:
            self.success = esperado
        elif self.success is not esperado:
            raise ValueError(f"success={self.success} é incompatível com o código {self.code}.")
        return self

    @classmethod
    def sucesso(cls, data: Any = None, message: str = "", code: int = 200) -> "Response":
        """Resposta 2xx.

        Exemplo:
            >>> Response.sucesso(data={"item_id": "tx-1"}, code=202).success
            True
        """
        if not (200 <= code < 300):
            raise ValueError("Respostas de sucesso exigem código 2xx.")
        return cls(success=True, message=message, data=data, code=code)

    @classmethod
    def falha(cls, message: str, code: int = INVALIDO, data: Any = None) -> "Response":
        if code < 400:
            raise ValueError("Respostas de falha exigem código 4xx ou 5xx.")
        return cls(success=False, message=message, data=data, code=code)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()

    def to_json(self) -> str:
        return self.model_dump_json()

    def __bool__(self) -> bool:
        return bool(self.success)

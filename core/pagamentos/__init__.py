from .planejador import (
    dias_para_vencer,
    inserir_pagamento,
    marcar_pago,
    planejar_pagamento,
    remover_pagamento,
)

__all__ = [
    "dias_para_vencer",
    "inserir_pagamento",
    "marcar_pago",
    "planejar_pagamento",
    "remover_pagamento",
]

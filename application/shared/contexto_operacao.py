from __future__ import annotations

import uuid
from contextvars import ContextVar
from typing import Optional

# Correlation id of the ledger operation being executed (read by the logging filter)
_operation_id_ctx: ContextVar[Optional[str]] = ContextVar("operation_id", default=None)


def set_operation_id(value: Optional[str]) -> None:
    _operation_id_ctx.set(value)


def get_operation_id() -> Optional[str]:
    return _operation_id_ctx.get()


def generate_operation_id() -> str:
    return uuid.uuid4().hex

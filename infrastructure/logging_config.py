from __future__ import annotations

import logging
import logging.config
import os
import sys
from typing import Any, Optional

from application.shared.contexto_operacao import get_operation_id


class OperationIdFilter(logging.Filter):
    """Injects the current operation id into log records."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        setattr(record, "operation_id", get_operation_id() or "-")
        return True


def configure_logging(level: Optional[str] = None) -> None:
    nivel = (level or os.getenv("LOG_LEVEL", "INFO")).upper()

    handlers: dict[str, Any] = {
        "console": {
            "class": "logging.StreamHandler",
            "stream": sys.stdout,
            "formatter": "standard",
            "filters": ["operation_id"],
        }
    }

    formatters: dict[str, Any] = {
        "standard": {
            "format": "%(asctime)s | %(levelname)s | %(name)s | op=%(operation_id)s | %(message)s",
            "datefmt": "%Y-%m-%dT%H:%M:%S%z",
        }
    }

    filters: dict[str, Any] = {
        "operation_id": {
            "()": OperationIdFilter,
        }
    }

    loggers: dict[str, Any] = {
        "asyncio": {"level": os.getenv("LOG_LEVEL_ASYNCIO", "WARNING").upper()},
        "financeiro": {"level": nivel, "handlers": ["console"], "propagate": False},
    }

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "filters": filters,
            "formatters": formatters,
            "handlers": handlers,
            "root": {"level": nivel, "handlers": ["console"]},
            "loggers": loggers,
        }
    )

from __future__ import annotations

import logging
import sys
from logging.config import dictConfig
from typing import Iterable, Sequence

from settings import get_settings

# Context attached through ``extra=`` by the resolver, the table generator
# and the command-line boundary.
CONTEXT_KEYS = (
    "option",
    "value",
    "circuit_variant",
    "adc_resolution",
    "adc_code",
    "row_count",
)

_configured = False


class ContextualFormatter(logging.Formatter):
    """Append ``key=value`` pairs for the known context keys of a record."""

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        style: str = "%",
        context_keys: Iterable[str] | None = None,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt, style=style)
        self._context_keys: Sequence[str] = tuple(context_keys or CONTEXT_KEYS)

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = " ".join(
            f"{key}={getattr(record, key)!s}"
            for key in self._context_keys
            if getattr(record, key, None) is not None
        )
        return f"{message} | {context}" if context else message


class DiagnosticsHandler(logging.StreamHandler):
    """Write to whatever ``sys.stderr`` is when the record is emitted.

    stdout carries the lookup table, so diagnostics never go there; looking
    the stream up late keeps redirected or replaced stderr streams working.
    """

    def __init__(self) -> None:
        super().__init__(stream=sys.stderr)

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, _value) -> None:
        pass


def configure_logging(level: str | int | None = None) -> None:
    """Install the diagnostics handler on the root logger once per process."""
    global _configured
    if _configured:
        return

    log_level = level if level is not None else get_settings().log_level

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "diagnostics": {
                    "()": "logging_config.ContextualFormatter",
                    "fmt": "%(levelname)s %(name)s: %(message)s",
                    "context_keys": list(CONTEXT_KEYS),
                }
            },
            "handlers": {
                "stderr": {
                    "()": "logging_config.DiagnosticsHandler",
                    "level": log_level,
                    "formatter": "diagnostics",
                }
            },
            "root": {"handlers": ["stderr"], "level": log_level},
        }
    )

    _configured = True

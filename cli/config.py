from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_DELIMITER = "\t"
DEFAULT_PRECISION = 6

_DELIMITER_ENV = "THERMISTOR_TABLE_DELIMITER"
_PRECISION_ENV = "THERMISTOR_TABLE_PRECISION"


@dataclass(frozen=True)
class TableFormat:
    delimiter: str = DEFAULT_DELIMITER
    precision: int = DEFAULT_PRECISION


def _read_delimiter(value: Optional[str], default: str) -> str:
    if not value:
        return default
    return value.replace("\\t", "\t")


def _read_precision(value: Optional[str], default: int) -> int:
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = int(candidate)
    except ValueError:
        return default
    return parsed if parsed >= 0 else default


def load_config(
    delimiter: Optional[str] = None,
    precision: Optional[int] = None,
) -> TableFormat:
    if delimiter is None:
        delimiter = _read_delimiter(os.getenv(_DELIMITER_ENV), DEFAULT_DELIMITER)
    else:
        delimiter = _read_delimiter(delimiter, DEFAULT_DELIMITER)
    if precision is None:
        precision = _read_precision(os.getenv(_PRECISION_ENV), DEFAULT_PRECISION)
    return TableFormat(delimiter=delimiter, precision=precision)

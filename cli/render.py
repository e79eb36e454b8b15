from __future__ import annotations

from typing import Iterable

import typer

from cli.config import TableFormat
from models.records import LookupRow

HEADER_COLUMNS = (
    "ADC value",
    "Thermistor voltage (V)",
    "Thermistor resistance (ohm)",
    "Thermistor temperature (Celsius)",
)


def format_header(table_format: TableFormat) -> str:
    return table_format.delimiter.join(HEADER_COLUMNS)


def format_row(row: LookupRow, table_format: TableFormat) -> str:
    precision = table_format.precision
    fields = (
        str(row.adc_code),
        f"{row.divider_output_voltage:.{precision}f}",
        f"{row.thermistor_resistance:.{precision}f}",
        f"{row.thermistor_temperature:.{precision}f}",
    )
    return table_format.delimiter.join(fields)


def render_table(rows: Iterable[LookupRow], table_format: TableFormat) -> None:
    typer.echo(format_header(table_format))
    for row in rows:
        typer.echo(format_row(row, table_format))

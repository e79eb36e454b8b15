from __future__ import annotations

import math

from cli.config import TableFormat
from cli.render import format_header, format_row
from models.records import LookupRow


def test_header_names_four_columns() -> None:
    header = format_header(TableFormat(delimiter="|"))

    assert header.split("|") == [
        "ADC value",
        "Thermistor voltage (V)",
        "Thermistor resistance (ohm)",
        "Thermistor temperature (Celsius)",
    ]


def test_row_keeps_special_values() -> None:
    row = LookupRow(
        adc_code=7,
        divider_output_voltage=1.25,
        thermistor_resistance=math.inf,
        thermistor_temperature=math.nan,
    )

    assert format_row(row, TableFormat(precision=3)) == "7\t1.250\tinf\tnan"

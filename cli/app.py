from __future__ import annotations

import logging
from typing import Optional

import typer

from cli.config import load_config
from cli.render import render_table
from logging_config import configure_logging
from services.resolver import ConfigurationError, resolve_configuration
from services.table import TableGenerator

logger = logging.getLogger(__name__)

CIRCUIT_DIAGRAMS = """\b
Here are the two voltage divider circuits that are supported by the program :

\b
Circuit variant 1        Circuit variant 2
-----------------        -----------------
      Vcc                      Vcc
       |                        |
      +-+                      +-+
      | | Resistor             | | NTC
      +-+                      +-+
       |                        |
       |--- Vntc                |--- Vntc
       |                        |
      +-+                      +-+
      | | NTC                  | | Resistor
      +-+                      +-+
       |                        |
      GND                      GND
"""

app = typer.Typer(
    help="Compute the ADC lookup table of an NTC thermistor voltage divider.",
    context_settings={"help_option_names": ["-h", "--help"]},
    rich_markup_mode=None,
    pretty_exceptions_enable=False,
    add_completion=False,
)


@app.command(epilog=CIRCUIT_DIAGRAMS)
def main(
    ctx: typer.Context,
    circuit: Optional[str] = typer.Option(
        None,
        "--circuit",
        "-c",
        metavar="CIRCUIT",
        help="Circuit variant, 1 or 2 (see circuit variants below). Default value is 1.",
    ),
    beta: Optional[str] = typer.Option(
        None,
        "--beta",
        "-B",
        metavar="BETA",
        help="Thermistor Beta coefficient (kelvin), the B25/100 datasheet value. Default value is 4300.",
    ),
    r25: Optional[str] = typer.Option(
        None,
        "--r25",
        "-R",
        metavar="R25",
        help="Thermistor resistance at 25 Celsius degrees (ohm). Default value is 10000.",
    ),
    resistor: Optional[str] = typer.Option(
        None,
        "--resistor",
        "-r",
        metavar="RESISTOR",
        help="Voltage divider bridge other resistance value (ohm). Default value is 10000.",
    ),
    vcc: Optional[str] = typer.Option(
        None,
        "--vcc",
        "-v",
        metavar="VCC",
        help="Vcc voltage (volt). Default value is 3.3.",
    ),
    adc_resolution: Optional[str] = typer.Option(
        None,
        "--adc-resolution",
        "-a",
        metavar="RESOLUTION",
        help="ADC resolution, i.e. how many values the lookup table holds (at most 65536). Default value is 256.",
    ),
    delimiter: Optional[str] = typer.Option(
        None,
        "--delimiter",
        help="Column delimiter of the printed table (defaults to THERMISTOR_TABLE_DELIMITER env or a tab).",
    ),
    precision: Optional[int] = typer.Option(
        None,
        "--precision",
        min=0,
        help="Decimals printed for voltages, resistances and temperatures (defaults to THERMISTOR_TABLE_PRECISION env or 6).",
    ),
) -> None:
    """Compute the ADC lookup table (containing Celsius temperatures) corresponding
    to a specific thermistor voltage, taking into account the voltage divider the
    thermistor is connected to.

    For now, only Negative Temperature Coefficient thermistors are supported.
    """
    configure_logging()
    try:
        config = resolve_configuration(
            {
                "circuit_variant": circuit,
                "beta_coefficient": beta,
                "reference_resistance": r25,
                "bridge_resistor": resistor,
                "supply_voltage": vcc,
                "adc_resolution": adc_resolution,
            }
        )
    except ConfigurationError as exc:
        logger.info("Configuration rejected", extra={"option": exc.option, "value": exc.value})
        typer.secho(f"Error : {exc}", fg=typer.colors.RED, err=True)
        typer.echo(err=True)
        typer.echo(ctx.get_help(), err=True)
        raise typer.Exit(code=1)

    table_format = load_config(delimiter=delimiter, precision=precision)
    render_table(TableGenerator().rows(config), table_format)


if __name__ == "__main__":
    app()

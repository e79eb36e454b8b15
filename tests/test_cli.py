from __future__ import annotations

import logging

import pytest
from typer.testing import CliRunner

from cli.app import app

HEADER = "ADC value\tThermistor voltage (V)\tThermistor resistance (ohm)\tThermistor temperature (Celsius)"


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def _clear_format_env(monkeypatch) -> None:
    monkeypatch.delenv("THERMISTOR_TABLE_DELIMITER", raising=False)
    monkeypatch.delenv("THERMISTOR_TABLE_PRECISION", raising=False)


def test_default_table(runner: CliRunner) -> None:
    result = runner.invoke(app, [])

    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert lines[0] == HEADER
    assert len(lines) == 257
    assert lines[1] == "0\t0.000000\t0.000000\t-273.150000"
    assert lines[129].startswith("128\t1.656471\t10078.74")
    assert lines[-1] == "255\t3.300000\tinf\t-273.150000"


def test_short_options_override_defaults(runner: CliRunner) -> None:
    result = runner.invoke(app, ["-c", "2", "-B", "3950", "-R", "10000", "-r", "10000", "-v", "5", "-a", "3"])

    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert lines[1] == "0\t0.000000\tinf\t-273.150000"
    assert lines[2].startswith("1\t2.500000\t10000.000000\t25.000000")
    assert len(lines) == 4


def test_long_options_and_formatting(runner: CliRunner) -> None:
    result = runner.invoke(
        app, ["--adc-resolution", "2", "--delimiter", ",", "--precision", "2"]
    )

    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "ADC value,Thermistor voltage (V),Thermistor resistance (ohm),Thermistor temperature (Celsius)",
        "0,0.00,0.00,-273.15",
        "1,3.30,inf,-273.15",
    ]


def test_formatting_from_environment(monkeypatch, runner: CliRunner) -> None:
    monkeypatch.setenv("THERMISTOR_TABLE_DELIMITER", ";")
    monkeypatch.setenv("THERMISTOR_TABLE_PRECISION", "1")

    result = runner.invoke(app, ["-a", "2"])

    assert result.exit_code == 0
    assert result.stdout.splitlines()[2] == "1;3.3;inf;-273.1"


@pytest.mark.parametrize(
    ("args", "flag"),
    [
        (["-a", "100000"], "-a"),
        (["-c", "3"], "-c"),
        (["-B", "abc"], "-B"),
        (["-v", "0"], "-v"),
    ],
)
def test_invalid_configuration_prints_no_table(runner: CliRunner, args: list[str], flag: str) -> None:
    result = runner.invoke(app, args)

    assert result.exit_code == 1
    assert "Error :" in result.output
    assert flag in result.output
    assert "Usage:" in result.output
    assert "ADC value\t" not in result.output


def test_help_exits_successfully(runner: CliRunner) -> None:
    result = runner.invoke(app, ["-h"])

    assert result.exit_code == 0
    assert "Usage:" in result.stdout
    assert "Negative Temperature Coefficient" in result.stdout
    assert "Circuit variant 1        Circuit variant 2" in result.stdout
    assert "ADC value\t" not in result.stdout


def test_unknown_option_fails(runner: CliRunner) -> None:
    result = runner.invoke(app, ["-x", "1"])

    assert result.exit_code == 2
    assert "ADC value\t" not in result.output


def test_negative_precision_fails(runner: CliRunner) -> None:
    result = runner.invoke(app, ["--precision", "-1"])

    assert result.exit_code == 2


def test_rejected_configuration_is_logged(monkeypatch, runner: CliRunner, caplog) -> None:
    monkeypatch.setattr("cli.app.configure_logging", lambda: None)
    caplog.set_level(logging.INFO, logger="cli.app")

    result = runner.invoke(app, ["-a", "100000"])

    assert result.exit_code == 1
    records = [record for record in caplog.records if record.getMessage() == "Configuration rejected"]
    assert len(records) == 1
    assert records[0].option == "-a"
    assert records[0].value == "100000"


def test_package_root_has_no_lazy_attributes() -> None:
    import cli

    assert "__getattr__" not in vars(cli)

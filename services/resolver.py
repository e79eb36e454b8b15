"""Resolve a :class:`Configuration` from defaults and raw command-line overrides."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Mapping, Optional

from pydantic import ValidationError

from models.configuration import Configuration

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OptionSpec:
    """How a configuration field is exposed and parsed on the command line."""

    flag: str
    label: str
    parse: Callable[[str], float | int]


OPTIONS: Dict[str, OptionSpec] = {
    "circuit_variant": OptionSpec("-c", "circuit variant", int),
    "beta_coefficient": OptionSpec("-B", "thermistor beta coefficient", float),
    "reference_resistance": OptionSpec("-R", "thermistor reference resistance (R25)", float),
    "bridge_resistor": OptionSpec("-r", "voltage divider resistor", float),
    "supply_voltage": OptionSpec("-v", "voltage divider bridge voltage", float),
    "adc_resolution": OptionSpec("-a", "ADC resolution", int),
}


class ConfigurationError(ValueError):
    """Raised when a command-line override cannot produce a valid configuration."""

    def __init__(self, option: str, value: Optional[str], message: str) -> None:
        super().__init__(message)
        self.option = option
        self.value = value
        self.message = message

    def __str__(self) -> str:
        return f"{self.message} (option {self.option})"


def _parse_override(field_name: str, raw: str) -> float | int:
    spec = OPTIONS[field_name]
    try:
        return spec.parse(raw.strip())
    except ValueError:
        raise ConfigurationError(
            spec.flag, raw, f"invalid {spec.label} value {raw!r}"
        ) from None


def _translate_validation_error(exc: ValidationError, raw_values: Mapping[str, str]) -> ConfigurationError:
    error = exc.errors()[0]
    field_name = str(error["loc"][0])
    spec = OPTIONS[field_name]
    raw = raw_values.get(field_name)
    detail = error["msg"]
    if detail and detail[0].isupper():
        detail = detail[0].lower() + detail[1:]
    return ConfigurationError(
        spec.flag, raw, f"invalid {spec.label} value {raw!r}: {detail}"
    )


def resolve_configuration(overrides: Optional[Mapping[str, Optional[str]]] = None) -> Configuration:
    """Overlay ``overrides`` onto the defaults and validate the result.

    ``overrides`` maps configuration field names to the raw text given on the
    command line; ``None`` values mean the option was not supplied. The first
    invalid option raises :class:`ConfigurationError`.
    """
    raw_values: Dict[str, str] = {}
    parsed: Dict[str, float | int] = {}

    for field_name, raw in (overrides or {}).items():
        if raw is None:
            continue
        if field_name not in OPTIONS:
            raise ConfigurationError(field_name, raw, f"unknown configuration option {field_name!r}")
        raw_values[field_name] = raw
        parsed[field_name] = _parse_override(field_name, raw)

    try:
        config = Configuration(**parsed)
    except ValidationError as exc:
        raise _translate_validation_error(exc, raw_values) from None

    logger.debug(
        "Resolved configuration",
        extra={
            "circuit_variant": config.circuit_variant.value,
            "adc_resolution": config.adc_resolution,
        },
    )
    return config

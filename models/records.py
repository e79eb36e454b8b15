"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CircuitVariant(int, Enum):
    """Which leg of the voltage divider the thermistor occupies."""

    resistor_then_ntc = 1
    ntc_then_resistor = 2


@dataclass(frozen=True, slots=True)
class LookupRow:
    """All computed values for a single ADC code."""

    adc_code: int
    divider_output_voltage: float
    thermistor_resistance: float
    thermistor_temperature: float

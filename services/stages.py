"""Voltage, resistance and temperature stages of the lookup pipeline.

Every stage is a pure function. The resistance and temperature stages work on
``numpy.float64`` with floating-point warnings silenced, so the extremes of the
linear ADC model surface as ``inf``/``nan`` in the table instead of raising.
"""

from __future__ import annotations

from typing import Callable, Dict

import numpy as np

from models.records import CircuitVariant

ZERO_CELSIUS_IN_KELVIN = 273.15
REFERENCE_TEMPERATURE_KELVIN = ZERO_CELSIUS_IN_KELVIN + 25.0


def output_voltage(adc_code: int, supply_voltage: float, adc_resolution: int) -> float:
    """Return the divider output voltage for ``adc_code``.

    Assumes an ideal linear converter: code 0 is 0V and the highest code
    (``adc_resolution - 1``) is exactly ``supply_voltage``.
    """
    # Ratio first so the highest code maps to exactly supply_voltage.
    return supply_voltage * (adc_code / (adc_resolution - 1))


def _resistor_then_ntc(supply_voltage: np.float64, voltage: np.float64, bridge_resistor: np.float64) -> np.float64:
    return np.divide(voltage * bridge_resistor, supply_voltage - voltage)


def _ntc_then_resistor(supply_voltage: np.float64, voltage: np.float64, bridge_resistor: np.float64) -> np.float64:
    return np.divide(supply_voltage * bridge_resistor, voltage) - bridge_resistor


ResistanceFormula = Callable[[np.float64, np.float64, np.float64], np.float64]

RESISTANCE_FORMULAS: Dict[CircuitVariant, ResistanceFormula] = {
    CircuitVariant.resistor_then_ntc: _resistor_then_ntc,
    CircuitVariant.ntc_then_resistor: _ntc_then_resistor,
}


def thermistor_resistance(
    variant: CircuitVariant,
    supply_voltage: float,
    voltage: float,
    bridge_resistor: float,
) -> float:
    """Invert the divider equation to recover the thermistor resistance.

    ``resistor_then_ntc`` reaches ``+inf`` when ``voltage == supply_voltage``
    and ``ntc_then_resistor`` reaches ``+inf`` when ``voltage == 0``.
    """
    formula = RESISTANCE_FORMULAS[CircuitVariant(variant)]
    with np.errstate(divide="ignore", invalid="ignore"):
        resistance = formula(
            np.float64(supply_voltage), np.float64(voltage), np.float64(bridge_resistor)
        )
    return float(resistance)


def divider_voltage(
    variant: CircuitVariant,
    supply_voltage: float,
    resistance: float,
    bridge_resistor: float,
) -> float:
    """Forward divider equation, the inverse of :func:`thermistor_resistance`."""
    if CircuitVariant(variant) is CircuitVariant.resistor_then_ntc:
        return supply_voltage * resistance / (bridge_resistor + resistance)
    return supply_voltage * bridge_resistor / (resistance + bridge_resistor)


def thermistor_temperature(
    beta_coefficient: float,
    reference_resistance: float,
    resistance: float,
) -> float:
    """Convert a resistance to Celsius with the Beta parameter model.

    ``ln(0) = -inf`` and ``ln(inf) = inf`` both give absolute zero; negative or
    NaN resistances give NaN.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        log_ratio = np.log(np.divide(np.float64(resistance), reference_resistance))
        kelvin = np.divide(1.0, log_ratio / beta_coefficient + 1.0 / REFERENCE_TEMPERATURE_KELVIN)
    return float(kelvin - ZERO_CELSIUS_IN_KELVIN)

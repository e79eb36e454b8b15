"""Pydantic model holding the resolved calculator configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from models.records import CircuitVariant

MAXIMUM_ADC_RESOLUTION = 65536

DEFAULT_CIRCUIT_VARIANT = CircuitVariant.resistor_then_ntc
DEFAULT_BETA_COEFFICIENT = 4300.0
DEFAULT_REFERENCE_RESISTANCE = 10000.0
DEFAULT_BRIDGE_RESISTOR = 10000.0
DEFAULT_SUPPLY_VOLTAGE = 3.3
DEFAULT_ADC_RESOLUTION = 256


class Configuration(BaseModel):
    """Circuit, thermistor and ADC parameters driving the lookup table."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    circuit_variant: CircuitVariant = DEFAULT_CIRCUIT_VARIANT
    beta_coefficient: float = Field(
        default=DEFAULT_BETA_COEFFICIENT,
        gt=0,
        description="Thermistor B25/100 coefficient in kelvin.",
    )
    reference_resistance: float = Field(
        default=DEFAULT_REFERENCE_RESISTANCE,
        gt=0,
        description="Thermistor resistance at 25 Celsius degrees (ohm).",
    )
    bridge_resistor: float = Field(
        default=DEFAULT_BRIDGE_RESISTOR,
        gt=0,
        description="Fixed resistor of the voltage divider (ohm).",
    )
    supply_voltage: float = Field(
        default=DEFAULT_SUPPLY_VOLTAGE,
        gt=0,
        description="Voltage divider supply voltage Vcc (volt).",
    )
    adc_resolution: int = Field(
        default=DEFAULT_ADC_RESOLUTION,
        ge=2,
        le=MAXIMUM_ADC_RESOLUTION,
        description="Amount of ADC steps, e.g. 256 for an 8-bit converter.",
    )

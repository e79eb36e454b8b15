"""Lookup table generation over the full ADC code range."""

from __future__ import annotations

import logging
import math
from typing import Iterator, List

from models.configuration import Configuration
from models.records import LookupRow
from services.stages import output_voltage, thermistor_resistance, thermistor_temperature

logger = logging.getLogger(__name__)


class TableGenerator:
    """Runs the voltage, resistance and temperature stages for every ADC code."""

    def compute_row(self, config: Configuration, adc_code: int) -> LookupRow:
        voltage = output_voltage(adc_code, config.supply_voltage, config.adc_resolution)
        resistance = thermistor_resistance(
            config.circuit_variant,
            config.supply_voltage,
            voltage,
            config.bridge_resistor,
        )
        temperature = thermistor_temperature(
            config.beta_coefficient,
            config.reference_resistance,
            resistance,
        )
        if not (math.isfinite(resistance) and math.isfinite(temperature)):
            logger.debug(
                "Numeric boundary reached",
                extra={"adc_code": adc_code, "circuit_variant": config.circuit_variant.value},
            )
        return LookupRow(
            adc_code=adc_code,
            divider_output_voltage=voltage,
            thermistor_resistance=resistance,
            thermistor_temperature=temperature,
        )

    def rows(self, config: Configuration) -> Iterator[LookupRow]:
        """Yield one row per ADC code, in ascending code order."""
        for adc_code in range(config.adc_resolution):
            yield self.compute_row(config, adc_code)
        logger.info("Generated lookup table", extra={"row_count": config.adc_resolution})

    def generate(self, config: Configuration) -> List[LookupRow]:
        return list(self.rows(config))

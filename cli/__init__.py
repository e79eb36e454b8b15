"""Command-line interface of the thermistor lookup table calculator."""

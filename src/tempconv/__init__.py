"""Convert temperatures between Celsius, Fahrenheit, and Kelvin."""

__version__ = "0.1.0"

"""Temperature conversion between Celsius, Fahrenheit, and Kelvin.

Every directed pair has its own single-step formula; Fahrenheit <-> Kelvin
does not pass through Celsius so the result is rounded only once.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tempconv.models.scale import TemperatureScale

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

ABSOLUTE_ZERO_CELSIUS = -273.15
_KELVIN_OFFSET = 273.15


def celsius_to_fahrenheit(c: float) -> float:
    """Convert Celsius to Fahrenheit."""
    return c * 9.0 / 5.0 + 32.0


def celsius_to_kelvin(c: float) -> float:
    return c + _KELVIN_OFFSET


def fahrenheit_to_celsius(f: float) -> float:
    """Convert Fahrenheit to Celsius."""
    return (f - 32.0) * 5.0 / 9.0


def fahrenheit_to_kelvin(f: float) -> float:
    return (f - 32.0) * 5.0 / 9.0 + _KELVIN_OFFSET


def kelvin_to_celsius(k: float) -> float:
    return k - _KELVIN_OFFSET


def kelvin_to_fahrenheit(k: float) -> float:
    return (k - _KELVIN_OFFSET) * 9.0 / 5.0 + 32.0


_C = TemperatureScale.CELSIUS
_F = TemperatureScale.FAHRENHEIT
_K = TemperatureScale.KELVIN

_FORMULAS: dict[tuple[TemperatureScale, TemperatureScale], Callable[[float], float]] = {
    (_C, _F): celsius_to_fahrenheit,
    (_C, _K): celsius_to_kelvin,
    (_F, _C): fahrenheit_to_celsius,
    (_F, _K): fahrenheit_to_kelvin,
    (_K, _C): kelvin_to_celsius,
    (_K, _F): kelvin_to_fahrenheit,
}


def convert(value: float, source: TemperatureScale, target: TemperatureScale) -> float:
    """Convert *value* from *source* to *target*.

    Same-scale conversions return *value* untouched.  No range check is
    applied: readings below absolute zero and NaN/inf pass through the
    arithmetic as-is.
    """
    if source == target:
        return value
    result = _FORMULAS[(source, target)](value)
    logger.debug("Converted %r %s -> %r %s", value, source, result, target)
    return result

from __future__ import annotations

import math

import pytest

from tempconv._internal.units import (
    ABSOLUTE_ZERO_CELSIUS,
    celsius_to_fahrenheit,
    convert,
    fahrenheit_to_celsius,
)
from tempconv.models.scale import TemperatureScale

C = TemperatureScale.CELSIUS
F = TemperatureScale.FAHRENHEIT
K = TemperatureScale.KELVIN

EPSILON = 1e-4


class TestIdentity:
    @pytest.mark.parametrize("scale", list(TemperatureScale))
    @pytest.mark.parametrize("value", [0.0, 25.0, -40.0, 298.15, 1e-12, -1e300, 0.1 + 0.2])
    def test_same_scale_returns_value_exactly(
        self, scale: TemperatureScale, value: float
    ) -> None:
        assert convert(value, scale, scale) == value

    def test_same_scale_returns_same_object(self) -> None:
        value = 77.7
        assert convert(value, F, F) is value


class TestCelsius:
    def test_freezing_point(self) -> None:
        assert convert(0.0, C, F) == 32.0
        assert convert(0.0, C, K) == 273.15

    def test_boiling_point(self) -> None:
        assert convert(100.0, C, F) == 212.0

    def test_room_temperature(self) -> None:
        assert convert(20.0, C, F) == pytest.approx(68.0, abs=EPSILON)

    def test_crossing_point(self) -> None:
        assert convert(-40.0, C, F) == -40.0

    def test_absolute_zero(self) -> None:
        assert convert(ABSOLUTE_ZERO_CELSIUS, C, K) == 0.0


class TestFahrenheit:
    def test_freezing_point(self) -> None:
        assert convert(32.0, F, C) == pytest.approx(0.0, abs=EPSILON)
        assert convert(32.0, F, K) == pytest.approx(273.15, abs=EPSILON)

    def test_boiling_point(self) -> None:
        assert convert(212.0, F, C) == pytest.approx(100.0, abs=EPSILON)

    def test_crossing_point(self) -> None:
        assert convert(-40.0, F, C) == pytest.approx(-40.0, abs=EPSILON)

    def test_absolute_zero(self) -> None:
        assert convert(-459.67, F, K) == pytest.approx(0.0, abs=EPSILON)

    def test_kelvin_uses_single_step_formula(self) -> None:
        value = 98.6
        assert convert(value, F, K) == (value - 32.0) * 5.0 / 9.0 + 273.15


class TestKelvin:
    def test_freezing_point(self) -> None:
        assert convert(273.15, K, C) == pytest.approx(0.0, abs=EPSILON)
        assert convert(273.15, K, F) == pytest.approx(32.0, abs=EPSILON)

    def test_absolute_zero(self) -> None:
        assert convert(0.0, K, C) == pytest.approx(-273.15, abs=EPSILON)
        assert convert(0.0, K, F) == pytest.approx(-459.67, abs=EPSILON)

    def test_fahrenheit_uses_single_step_formula(self) -> None:
        value = 310.15
        assert convert(value, K, F) == (value - 273.15) * 9.0 / 5.0 + 32.0


class TestRoundTrip:
    @pytest.mark.parametrize("source", list(TemperatureScale))
    @pytest.mark.parametrize("target", list(TemperatureScale))
    @pytest.mark.parametrize("value", [-500.0, -40.0, 0.0, 36.6, 1000.0])
    def test_round_trip_within_tolerance(
        self, source: TemperatureScale, target: TemperatureScale, value: float
    ) -> None:
        there = convert(value, source, target)
        assert convert(there, target, source) == pytest.approx(value, abs=EPSILON)


class TestNoRangeCheck:
    def test_below_absolute_zero_is_converted(self) -> None:
        assert convert(-300.0, C, K) == pytest.approx(-26.85, abs=EPSILON)

    def test_nan_propagates(self) -> None:
        assert math.isnan(convert(float("nan"), C, F))

    def test_infinity_propagates(self) -> None:
        assert convert(float("inf"), K, C) == float("inf")
        assert convert(float("-inf"), F, K) == float("-inf")


class TestHelpers:
    def test_helpers_do_not_round(self) -> None:
        assert celsius_to_fahrenheit(21.123) == 21.123 * 9.0 / 5.0 + 32.0
        assert fahrenheit_to_celsius(70.0) == (70.0 - 32.0) * 5.0 / 9.0

from __future__ import annotations

from pydantic import BaseModel

from tempconv.models.scale import TemperatureScale


class ConversionResult(BaseModel):
    """One input reading and its value in each requested target scale."""

    value: float
    source: TemperatureScale
    conversions: dict[TemperatureScale, float]

    @classmethod
    def from_value(
        cls,
        value: float,
        source: TemperatureScale,
        targets: list[TemperatureScale] | None = None,
    ) -> ConversionResult:
        """Convert *value* to *targets* (default: every other scale)."""
        from tempconv._internal.units import convert

        if targets is None:
            targets = source.others()
        return cls(
            value=value,
            source=source,
            conversions={t: convert(value, source, t) for t in targets},
        )

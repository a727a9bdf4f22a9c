from __future__ import annotations

from tempconv.models.config import AppSettings
from tempconv.models.conversion import ConversionResult
from tempconv.models.scale import TemperatureScale

__all__ = [
    "AppSettings",
    "ConversionResult",
    "TemperatureScale",
]

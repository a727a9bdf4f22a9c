from __future__ import annotations

from enum import StrEnum


class TemperatureScale(StrEnum):
    """The three supported temperature scales, in menu order."""

    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"
    KELVIN = "kelvin"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def symbol(self) -> str:
        """Display suffix, e.g. ``°C`` or ``K``."""
        return _SYMBOLS[self]

    @property
    def menu_choice(self) -> str:
        return str(list(TemperatureScale).index(self) + 1)

    def others(self) -> list[TemperatureScale]:
        """Return the remaining scales in menu order."""
        return [s for s in TemperatureScale if s is not self]

    @classmethod
    def from_menu_choice(cls, choice: str) -> TemperatureScale | None:
        """Map a menu entry (``"1"``-``"3"``) to its scale, or ``None``."""
        for scale in cls:
            if scale.menu_choice == choice.strip():
                return scale
        return None

    @classmethod
    def parse(cls, text: str) -> TemperatureScale:
        """Resolve a scale from its name or initial letter (case-insensitive).

        Raises:
            ValueError: *text* does not name a supported scale.
        """
        key = text.strip().lower()
        for scale in cls:
            if key in (scale.value, scale.value[0]):
                return scale
        raise ValueError(f"Unknown temperature scale: {text!r}")


_SYMBOLS = {
    TemperatureScale.CELSIUS: "°C",
    TemperatureScale.FAHRENHEIT: "°F",
    TemperatureScale.KELVIN: "K",
}

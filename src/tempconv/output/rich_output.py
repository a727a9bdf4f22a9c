from __future__ import annotations

import math
from decimal import Decimal
from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

from tempconv.models.scale import TemperatureScale

if TYPE_CHECKING:
    from rich.console import Console

    from tempconv.models.conversion import ConversionResult


def format_input_value(value: float) -> str:
    """Render a user-entered reading in full positional notation, unrounded.

    ``20.0`` becomes ``"20"`` and ``1e20`` becomes ``"100000000000000000000"``;
    NaN and infinities keep their ``repr``.
    """
    if not math.isfinite(value):
        return repr(value)
    text = format(Decimal(repr(value)), "f")
    return text.removesuffix(".0")


def format_reading(value: float, scale: TemperatureScale) -> str:
    """Render a converted reading with two decimals and the scale symbol."""
    return f"{value:.2f}{scale.symbol}"


class RichOutput:
    """Rich-based terminal output helpers for *tempconv*."""

    def __init__(self, console: Console) -> None:
        self._con = console

    # ------------------------------------------------------------------
    # Interactive menu
    # ------------------------------------------------------------------

    def menu(self) -> None:
        """Print the scale selection menu."""
        self._con.print("\n[bold]Temperature Conversion[/bold]")
        self._con.print("Choose the type to convert from:")
        for scale in TemperatureScale:
            self._con.print(f"    {scale.menu_choice}. {scale.label}")

    # ------------------------------------------------------------------
    # Conversion results
    # ------------------------------------------------------------------

    def conversion(self, result: ConversionResult) -> None:
        """Print a one-line report, e.g. ``20°C is 68.00°F and 293.15K``.

        A result with a single target prints just that reading (``68.00°F``).
        """
        if len(result.conversions) == 1:
            [(scale, value)] = result.conversions.items()
            self._con.print(format_reading(value, scale), highlight=False)
            return
        parts = [format_reading(v, scale) for scale, v in result.conversions.items()]
        source = f"{format_input_value(result.value)}{result.source.symbol}"
        self._con.print(f"{source} is {' and '.join(parts)}", highlight=False)

    def conversion_table(self, result: ConversionResult) -> None:
        """Print a table with the input reading and each converted value."""
        table = Table(title="Temperature")
        table.add_column("Scale", style="bold")
        table.add_column("Value", justify="right")

        table.add_row(
            f"{result.source.label} (input)",
            f"{format_input_value(result.value)}{result.source.symbol}",
        )
        for scale, value in result.conversions.items():
            table.add_row(scale.label, format_reading(value, scale))

        self._con.print(table)

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------

    def prompt(self, message: str) -> None:
        """Print a prompt without a trailing newline."""
        self._con.print(escape(message), end="", highlight=False)

    def error(self, message: str) -> None:
        """Print a bold red error line."""
        self._con.print(f"[bold red]Error:[/bold red] {message}")

    def info(self, message: str) -> None:
        """Print an informational message (plain)."""
        self._con.print(message)

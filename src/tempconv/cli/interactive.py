"""Interactive menu loop: pick a scale, enter a reading, see the other two."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import click

from tempconv.cli._options import global_options
from tempconv.errors import InputClosedError
from tempconv.models.conversion import ConversionResult
from tempconv.models.scale import TemperatureScale

if TYPE_CHECKING:
    from tempconv.cli.main import AppContext
    from tempconv.output.formatter import OutputFormatter

logger = logging.getLogger(__name__)

CHOICE_PROMPT = "Enter your choice (1-3): "
INVALID_CHOICE = "Invalid choice, please select between 1-3."
EXIT_MESSAGE = "Exiting the program."


def read_line(formatter: OutputFormatter, prompt: str) -> str:
    """Show *prompt* and return one stripped line from stdin.

    Raises:
        InputClosedError: stdin is at end-of-file.
    """
    formatter.rich.prompt(prompt)
    line = sys.stdin.readline()
    if not line:
        formatter.rich.info("")
        raise InputClosedError(prompt)
    return line.strip()


def convert_reading(formatter: OutputFormatter, scale: TemperatureScale) -> None:
    """Prompt for a reading in *scale* and report it in the other two scales."""
    text = read_line(formatter, f"Enter temperature in {scale.label}: ")
    try:
        value = float(text)
    except ValueError:
        logger.debug("Rejected %s reading %r", scale, text)
        formatter.rich.info(f"Invalid input for {scale.label}.")
        return

    result = ConversionResult.from_value(value, scale)
    formatter.output(result, command="interactive")


def run_loop(formatter: OutputFormatter, *, exit_word: str = "exit") -> None:
    """Run menu iterations until the user types *exit_word* (any case)."""
    sentinel = exit_word.lower()
    while True:
        formatter.rich.menu()
        choice = read_line(formatter, CHOICE_PROMPT)
        if choice.lower() == sentinel:
            break

        scale = TemperatureScale.from_menu_choice(choice)
        if scale is None:
            logger.debug("Invalid menu choice %r", choice)
            formatter.rich.info(INVALID_CHOICE)
        else:
            convert_reading(formatter, scale)

        formatter.rich.info("\nWould you like to perform another conversion?")
        answer = read_line(
            formatter, f"Press Enter to continue or type '{exit_word}' to quit: "
        )
        if answer.lower() == sentinel:
            break

    formatter.rich.info(EXIT_MESSAGE)


@click.command("interactive")
@global_options
def interactive_cmd(app_ctx: AppContext) -> None:
    """Start the interactive conversion menu (the default command)."""
    formatter = app_ctx.formatter
    try:
        run_loop(formatter, exit_word=app_ctx.settings.exit_word)
    except InputClosedError as exc:
        formatter.output_error(code="input_closed", message=str(exc), command="interactive")
        raise SystemExit(1) from exc

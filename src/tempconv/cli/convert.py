"""One-shot ``convert`` command."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from tempconv.cli._options import global_options
from tempconv.models.conversion import ConversionResult
from tempconv.models.scale import TemperatureScale

if TYPE_CHECKING:
    from tempconv.cli.main import AppContext


class ScaleType(click.ParamType):
    """Click parameter accepting ``c``/``celsius``, ``f``/``fahrenheit``, ``k``/``kelvin``."""

    name = "scale"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> TemperatureScale:
        if isinstance(value, TemperatureScale):
            return value
        try:
            return TemperatureScale.parse(str(value))
        except ValueError as exc:
            self.fail(str(exc), param, ctx)


SCALE = ScaleType()


# ignore_unknown_options lets negative readings such as "-40" through as VALUE;
# "-inf" still parses as "-i -n -f" and must follow "--".
@click.command("convert", context_settings={"ignore_unknown_options": True})
@click.argument("value", type=float)
@click.option("--from", "-f", "source", type=SCALE, required=True, help="Scale of VALUE")
@click.option(
    "--to",
    "-t",
    "target",
    type=SCALE,
    default=None,
    help="Target scale (default: both other scales)",
)
@click.option("--table", is_flag=True, default=False, help="Show results as a table")
@global_options
def convert_cmd(
    app_ctx: AppContext,
    value: float,
    source: TemperatureScale,
    target: TemperatureScale | None,
    table: bool,
) -> None:
    """Convert a single temperature VALUE.

    \b
    Examples:
      tempconv convert 20 --from c
      tempconv convert -40 --from f --to k
      tempconv convert --from c --to k -- -inf

    Negative readings such as -40 need no escaping, but -inf must come
    after "--" (click reads its "f" as the -f option).
    """
    formatter = app_ctx.formatter
    targets = [target] if target is not None else None
    result = ConversionResult.from_value(value, source, targets)

    formatter.output(result, command="convert", table=table)

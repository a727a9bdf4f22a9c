"""CLI entry-point: Click command group and dispatch."""

from __future__ import annotations

import dataclasses
import logging
import sys
from typing import Any

import click

from tempconv.models.config import AppSettings
from tempconv.output.formatter import OutputFormatter

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Application context (stored in ctx.obj)
# ---------------------------------------------------------------------------


@dataclasses.dataclass
class AppContext:
    """Shared state passed to every Click command via ``@click.pass_obj``."""

    output_format: str | None
    quiet: bool
    verbose: bool
    settings: AppSettings = dataclasses.field(default_factory=AppSettings)
    _formatter: OutputFormatter | None = dataclasses.field(default=None, repr=False)

    @property
    def formatter(self) -> OutputFormatter:
        if self._formatter is None:
            force = "quiet" if self.quiet else self.output_format
            self._formatter = OutputFormatter(force_format=force)
        return self._formatter


def configure_logging(*, verbose: bool) -> None:
    """Route ``tempconv`` log records to stderr at DEBUG when *verbose*."""
    pkg_logger = logging.getLogger("tempconv")
    if not verbose:
        pkg_logger.setLevel(logging.WARNING)
        return
    pkg_logger.setLevel(logging.DEBUG)
    if not pkg_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        pkg_logger.addHandler(handler)


# ---------------------------------------------------------------------------
# Root Click group
# ---------------------------------------------------------------------------


class TempconvGroup(click.Group):
    """Root group that reports unexpected command errors while the context is live."""

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except (click.exceptions.ClickException, click.exceptions.Exit, click.exceptions.Abort):
            raise
        except Exception as exc:
            app_ctx = ctx.obj if isinstance(ctx.obj, AppContext) else None
            formatter = app_ctx.formatter if app_ctx else OutputFormatter()
            cmd_name = ctx.invoked_subcommand or "interactive"

            logger.debug("Unhandled error in %s", cmd_name, exc_info=True)
            formatter.output_error(
                code=type(exc).__name__,
                message=str(exc),
                command=cmd_name,
            )
            raise SystemExit(1) from exc


@click.group(cls=TempconvGroup, invoke_without_command=True)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["rich", "json", "quiet"]),
    default=None,
    help="Output format (default: auto-detect)",
)
@click.option("--quiet", is_flag=True, default=False, help="Suppress normal output")
@click.option("--verbose", is_flag=True, default=False, help="Enable verbose logging")
@click.pass_context
def cli(
    ctx: click.Context,
    output_format: str | None,
    quiet: bool,
    verbose: bool,
) -> None:
    """Convert temperatures between Celsius, Fahrenheit, and Kelvin.

    Without a subcommand, starts the interactive conversion loop.
    """
    settings = AppSettings()
    verbose = verbose or settings.verbose
    configure_logging(verbose=verbose)
    ctx.obj = AppContext(
        output_format=output_format or settings.output_format,
        quiet=quiet,
        verbose=verbose,
        settings=settings,
    )
    if ctx.invoked_subcommand is None:
        from tempconv.cli.interactive import interactive_cmd

        ctx.invoke(interactive_cmd)


# ---------------------------------------------------------------------------
# Register subcommands (lazy imports keep startup fast)
# ---------------------------------------------------------------------------


def _register_commands() -> None:
    """Import and attach all subcommands to the root CLI."""
    from tempconv.cli.convert import convert_cmd
    from tempconv.cli.interactive import interactive_cmd

    cli.add_command(convert_cmd)
    cli.add_command(interactive_cmd)


_register_commands()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and dispatch to the appropriate command handler."""
    try:
        cli(args=argv, standalone_mode=False)
    except click.exceptions.Exit as exc:
        raise SystemExit(exc.exit_code) from None
    except click.exceptions.Abort as exc:
        # Click re-raises Ctrl-C as Abort chained to the KeyboardInterrupt.
        if isinstance(exc.__cause__, KeyboardInterrupt):
            raise SystemExit(130) from None
        raise SystemExit(1) from None
    except click.exceptions.ClickException as exc:
        exc.show()
        raise SystemExit(exc.exit_code) from None
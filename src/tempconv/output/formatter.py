from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any

from rich.console import Console

from tempconv.output.json_output import format_json_error, format_json_response
from tempconv.output.rich_output import RichOutput

if TYPE_CHECKING:
    from io import TextIOBase

    from tempconv.models.conversion import ConversionResult


class OutputFormatter:
    """Unified output formatter that auto-detects JSON vs Rich output.

    Selection logic:

    * If *force_format* is provided, use it unconditionally.
    * Otherwise, if *stream* (default ``sys.stdout``) is a TTY, use ``"rich"``.
    * If the stream is **not** a TTY (piped / redirected), use ``"json"``.

    Only ``"rich"`` prints Rich output to stdout.  In ``"json"`` and
    ``"quiet"`` mode the :class:`rich.console.Console` writes to *stderr*, so
    menus and prompts stay visible while stdout carries only JSON envelopes
    (or nothing).
    """

    def __init__(
        self,
        *,
        stream: TextIOBase | Any | None = None,
        force_format: str | None = None,
    ) -> None:
        self._stream = stream or sys.stdout
        if force_format is not None:
            self._format = force_format
        elif hasattr(self._stream, "isatty") and self._stream.isatty():
            self._format = "rich"
        else:
            self._format = "json"

        if self._format == "rich":
            self._console = Console()
        else:
            self._console = Console(stderr=True)

        self._rich = RichOutput(self._console)

    # ------------------------------------------------------------------
    # Public helpers
    # ------------------------------------------------------------------

    @property
    def format(self) -> str:  # noqa: A003
        """Return the active output format (``"rich"``, ``"json"``, or ``"quiet"``)."""
        return self._format

    @property
    def rich(self) -> RichOutput:
        """Return the underlying :class:`RichOutput` instance."""
        return self._rich

    def output(self, result: ConversionResult, *, command: str, table: bool = False) -> None:
        """Emit a conversion *result* using the current format.

        * **json** — prints :func:`format_json_response` to stdout.
        * **rich** / **quiet** — prints the one-line report, or a table when
          *table* is set.
        """
        if self._format == "json":
            print(format_json_response(data=result, command=command))  # noqa: T201
        elif table:
            self._rich.conversion_table(result)
        else:
            self._rich.conversion(result)

    def output_error(self, *, code: str, message: str, command: str) -> None:
        """Emit an error using the current format.

        * **json** — prints :func:`format_json_error` to stdout.
        * **rich** / **quiet** — prints via :meth:`RichOutput.error`.
        """
        if self._format == "json":
            print(format_json_error(code=code, message=message, command=command))  # noqa: T201
        else:
            self._rich.error(message)

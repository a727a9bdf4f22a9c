"""JSON envelopes for piped / ``--format json`` output.

Every line of machine output is one envelope::

    {
      "ok": true | false,
      "command": "convert" | "interactive",
      "data": {...} | "error": {"code": ..., "message": ...},
      "timestamp": "<ISO-8601 UTC>"
    }
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel


def _envelope(*, ok: bool, command: str, **body: Any) -> str:
    envelope: dict[str, Any] = {
        "ok": ok,
        "command": command,
        **body,
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return json.dumps(envelope, indent=2, default=str)


def format_json_response(*, data: BaseModel | list[BaseModel], command: str) -> str:
    """Return a success envelope for *data*.

    Models are dumped in JSON mode, so scale keys and values are the plain
    names (``"celsius"``) and non-finite floats become ``null``.
    """
    if isinstance(data, list):
        payload: Any = [item.model_dump(mode="json") for item in data]
    else:
        payload = data.model_dump(mode="json")
    return _envelope(ok=True, command=command, data=payload)


def format_json_error(*, code: str, message: str, command: str) -> str:
    """Return an error envelope with a machine-readable *code*."""
    return _envelope(ok=False, command=command, error={"code": code, "message": message})

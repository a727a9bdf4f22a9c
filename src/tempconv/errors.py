"""Exceptions raised by the tempconv command-line shell."""

from __future__ import annotations


class TempconvError(Exception):
    """Base class for tempconv errors."""


class InputClosedError(TempconvError):
    """Standard input reached end-of-file while a prompt was waiting."""

    def __init__(self, prompt: str = "") -> None:
        self.prompt = prompt
        super().__init__("Input stream closed; no more input to read.")

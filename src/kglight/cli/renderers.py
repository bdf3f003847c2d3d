"""
JSON output renderer for --json mode.

Every command emits the same envelope:

    {"meta": {"command": ..., "status": "success"|"error", "version": ...},
     "data": {...}}                         # on success
     "error": {"type": ..., "message": ...}  # on error
"""

import contextlib
import io
import json
from typing import Any, Iterator

import click
from pydantic import BaseModel

from .. import __version__
from ..core.errors import KglightError


class JsonRenderer:
    """Renders command results as a standard JSON envelope on stdout."""

    def __init__(self, command: str):
        self.command = command
        self.captured = ""

    def _meta(self, status: str) -> dict:
        return {"command": self.command, "status": status, "version": __version__}

    @contextlib.contextmanager
    def capture(self) -> Iterator[None]:
        """Swallow incidental stdout so only the envelope reaches the caller."""
        buffer = io.StringIO()
        with contextlib.redirect_stdout(buffer):
            yield
        self.captured = buffer.getvalue()

    def render_success(self, data: Any) -> None:
        if isinstance(data, BaseModel):
            data = data.model_dump(mode="json")
        click.echo(json.dumps({"meta": self._meta("success"), "data": data}, default=str))

    def render_error(self, error: Exception) -> None:
        message = error.message if isinstance(error, KglightError) else str(error)
        click.echo(json.dumps({
            "meta": self._meta("error"),
            "error": {"type": type(error).__name__, "message": message},
        }))

"""Response rendering.

Each response is pretty-printed into its own temporary `.txt` file, which is
then opened with the system's default handler (usually a text editor). The
renderer remembers every file it creates so they can be removed when the
program ends.
"""

from __future__ import annotations

import json
import logging
import tempfile
from collections.abc import Callable
from pathlib import Path
from types import TracebackType
from typing import Any

import typer
from rich.console import Console

from core.domain.api import ApiResponse

logger = logging.getLogger(__name__)

EMPTY_RESPONSE_TEXT = "Empty Response!"
RULE = "/" * 53


def format_response(response: ApiResponse) -> str:
    """Indented JSON of the payload, else the raw text, else a placeholder."""

    fallback = response.response_text if response.response_text is not None else EMPTY_RESPONSE_TEXT
    if response.response_object is None:
        return fallback
    try:
        text = json.dumps(response.response_object, ensure_ascii=False, indent=2)
        # Lone surrogates survive json.loads but not a utf-8 file.
        text.encode("utf-8")
    except (TypeError, ValueError) as exc:
        logger.debug("Structured payload is not serializable, using raw text: %s", exc)
        return fallback
    return text


def _write_temporary_file(text: str) -> Path:
    handle = tempfile.NamedTemporaryFile(
        mode="w",
        encoding="utf-8",
        errors="backslashreplace",
        suffix=".txt",
        delete=False,
    )
    path = Path(handle.name)
    try:
        with handle:
            handle.write(text)
    except OSError:
        path.unlink(missing_ok=True)
        raise
    return path


class ResponseRenderer:
    """Writes responses to temporary files and opens them for viewing."""

    def __init__(
        self,
        console: Console | None = None,
        *,
        opener: Callable[[str], Any] = typer.launch,
        open_viewer: bool = True,
    ) -> None:
        self._console = console or Console()
        self._opener = opener
        self._open_viewer = open_viewer
        self._temporary_files: list[Path] = []

    @property
    def temporary_files(self) -> list[Path]:
        return list(self._temporary_files)

    def render(self, description: str, response: ApiResponse) -> Path:
        self._console.print(RULE)
        self._console.print(
            f"{description} Response with Status Code: "
            f"{response.status_code} ({response.reason_phrase or 'n/a'})",
            markup=False,
        )
        self._console.print(RULE)

        path = _write_temporary_file(format_response(response))
        self._temporary_files.append(path)
        logger.debug("Rendered %s into %s", description, path)

        if self._open_viewer:
            self._opener(str(path))
        else:
            self._console.print(f"Response written to {path}", markup=False)
        return path

    def cleanup(self) -> None:
        """Delete every temporary file created so far."""

        for path in self._temporary_files:
            path.unlink(missing_ok=True)
        self._temporary_files.clear()

    def __enter__(self) -> ResponseRenderer:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.cleanup()

"""Command-line host: browser for URLs, stdout for documents."""

from __future__ import annotations

import logging
import sys
import webbrowser
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from links.models import Selection

LOGGER = logging.getLogger(__name__)


class ConsoleHost:
    """LinkHost for a plain terminal session.

    Documents are written as ``path[:line[:col]]`` (1-based) so the output
    can be handed to an editor.
    """

    def __init__(self, stdout: TextIO | None = None, stderr: TextIO | None = None) -> None:
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr

    def open_external(self, url: str) -> None:
        if not webbrowser.open(url):
            LOGGER.debug("No browser accepted %s", url)
            self.stdout.write(f"{url}\n")

    def show_text_document(self, path: str, selection: Selection | None) -> None:
        if selection is None:
            self.stdout.write(f"{path}\n")
            return
        self.stdout.write(f"{path}:{selection.line + 1}:{selection.character + 1}\n")

    def show_warning(self, message: str) -> None:
        self.stderr.write(f"warning: {message}\n")


__all__ = ["ConsoleHost"]

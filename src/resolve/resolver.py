"""Turn an activated link span into a single host action."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from links.models import (
    NoAction,
    OpenDocument,
    OpenExternal,
    Selection,
    ShowWarning,
)
from utils import is_absolute_path

if TYPE_CHECKING:
    from collections.abc import Sequence

    from host.protocol import LinkHost
    from links.models import LinkAction, LinkSpan
    from resolve.context import ResolutionContext

LOGGER = logging.getLogger(__name__)

DEFAULT_GITHUB_URL = "https://github.com"
DEFAULT_ADO_URL = "https://dev.azure.com"


def resolve_file_target(value: str, roots: Sequence[str]) -> str | None:
    """Resolve a scanned path to the file that should be opened.

    Absolute paths are returned unchanged and roots are not consulted.
    Relative paths are joined onto the first root; with no roots there is
    no target.
    """
    if is_absolute_path(value):
        return value
    if not roots:
        return None
    return str(Path(roots[0]) / value)


def _selection_for(span: LinkSpan) -> Selection | None:
    if span.line is None:
        return None
    column = span.column if span.column is not None else 1
    return Selection(line=max(span.line - 1, 0), character=max(column - 1, 0))


class LinkResolver:
    """Decides what an activated span means, given the current context."""

    def __init__(
        self,
        context: ResolutionContext,
        *,
        github_url: str = DEFAULT_GITHUB_URL,
        ado_url: str = DEFAULT_ADO_URL,
    ) -> None:
        self.context = context
        self.github_url = github_url.rstrip("/")
        self.ado_url = ado_url.rstrip("/")

    def resolve(self, span: LinkSpan, position: object | None = None) -> LinkAction:
        """Resolve ``span`` into an action.

        ``position`` is where the user activated the link; it does not change
        the outcome.
        """
        if span.kind == "issue":
            action = self._resolve_issue(span.value)
        elif span.kind == "work_item":
            action = self._resolve_work_item(span.value)
        else:
            action = self._resolve_file(span)
        LOGGER.debug("Resolved %s link %r to %s", span.kind, span.text, action.action)
        return action

    def _resolve_issue(self, number: str) -> LinkAction:
        repository = self.context.repository()
        if not repository:
            return ShowWarning(
                message=f"No GitHub repository configured. Cannot open #{number}."
            )
        return OpenExternal(url=f"{self.github_url}/{repository}/issues/{number}")

    def _resolve_work_item(self, number: str) -> LinkAction:
        identity = self.context.work_tracking()
        if identity is None:
            return ShowWarning(
                message=(
                    "No Azure DevOps configuration found. "
                    f"Cannot open work item {number}."
                )
            )
        return OpenExternal(
            url=(
                f"{self.ado_url}/{identity.organization}/{identity.project}"
                f"/_workitems/edit/{number}"
            )
        )

    def _resolve_file(self, span: LinkSpan) -> LinkAction:
        roots = () if is_absolute_path(span.value) else self.context.workspace_roots()
        target = resolve_file_target(span.value, roots)
        if target is None:
            return NoAction(reason=f"No workspace root to resolve {span.value}")
        return OpenDocument(path=target, selection=_selection_for(span))


def perform(action: LinkAction, host: LinkHost) -> None:
    """Carry out ``action`` through the host's capabilities."""
    if isinstance(action, OpenExternal):
        host.open_external(action.url)
    elif isinstance(action, OpenDocument):
        host.show_text_document(action.path, action.selection)
    elif isinstance(action, ShowWarning):
        host.show_warning(action.message)


__all__ = [
    "DEFAULT_ADO_URL",
    "DEFAULT_GITHUB_URL",
    "LinkResolver",
    "perform",
    "resolve_file_target",
]

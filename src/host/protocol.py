"""Capability protocols at the boundary with the hosting editor."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from links.models import LinkAction, LinkSpan, Selection


class LinkHost(Protocol):
    """Side effects a host environment offers to the resolver."""

    def open_external(self, url: str) -> None: ...

    def show_text_document(self, path: str, selection: Selection | None) -> None: ...

    def show_warning(self, message: str) -> None: ...


class LinkProvider(Protocol):
    def provide_links(self, line: str) -> list[LinkSpan]: ...


class LinkActivator(Protocol):
    def handle_link(self, span: LinkSpan) -> LinkAction: ...


__all__ = ["LinkActivator", "LinkHost", "LinkProvider"]

"""Terminal link provider wiring the scanner and resolver to a host."""

from __future__ import annotations

from typing import TYPE_CHECKING

from resolve.resolver import DEFAULT_ADO_URL, DEFAULT_GITHUB_URL, LinkResolver, perform
from scan.lines import scan_line

if TYPE_CHECKING:
    from host.protocol import LinkHost
    from links.models import LinkAction, LinkSpan
    from resolve.context import ResolutionContext


class TerminalLinkProvider:
    """Produces link spans for terminal lines and handles their activation.

    Implements both the ``LinkProvider`` and ``LinkActivator`` capabilities.
    """

    def __init__(
        self,
        context: ResolutionContext,
        host: LinkHost,
        *,
        github_url: str = DEFAULT_GITHUB_URL,
        ado_url: str = DEFAULT_ADO_URL,
    ) -> None:
        self.host = host
        self.resolver = LinkResolver(context, github_url=github_url, ado_url=ado_url)

    def provide_links(self, line: str) -> list[LinkSpan]:
        return scan_line(line)

    def handle_link(self, span: LinkSpan) -> LinkAction:
        action = self.resolver.resolve(span)
        perform(action, self.host)
        return action


__all__ = ["TerminalLinkProvider"]

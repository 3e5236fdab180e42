"""Host environment boundary for terminal links."""

from host.adapter import TerminalLinkProvider
from host.console import ConsoleHost
from host.protocol import LinkActivator, LinkHost, LinkProvider

__all__ = [
    "ConsoleHost",
    "LinkActivator",
    "LinkHost",
    "LinkProvider",
    "TerminalLinkProvider",
]

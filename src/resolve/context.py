"""Externally supplied lookups consulted when a link is activated."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from links.models import WorkTrackingIdentity


def _no_roots() -> Sequence[str]:
    return ()


@dataclass(frozen=True)
class ResolutionContext:
    """Lookups read at resolution time, never at scan time.

    Every call re-reads the underlying source; results are not memoized, so
    configuration changed after a line was scanned is honored on activation.
    """

    repository: Callable[[], str | None]
    work_tracking: Callable[[], WorkTrackingIdentity | None]
    workspace_roots: Callable[[], Sequence[str]] = field(default=_no_roots)


__all__ = ["ResolutionContext"]

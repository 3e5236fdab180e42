"""Model namespace for terminal link spans and actions."""

from links.models import (
    LinkAction,
    LinkKind,
    LinkSpan,
    NoAction,
    OpenDocument,
    OpenExternal,
    Selection,
    ShowWarning,
    WorkTrackingIdentity,
)

__all__ = [
    "LinkAction",
    "LinkKind",
    "LinkSpan",
    "NoAction",
    "OpenDocument",
    "OpenExternal",
    "Selection",
    "ShowWarning",
    "WorkTrackingIdentity",
]

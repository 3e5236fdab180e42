"""Ordered matching rules for references and file paths in terminal text."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from links.models import LinkKind


@dataclass(frozen=True)
class ReferencePattern:
    """One reference rule: a compiled pattern and the kind it produces.

    The pattern must expose the numeric identifier as its first group.
    """

    name: str
    regex: re.Pattern[str]
    kind: LinkKind


# Table order is discovery order. Each rule scans the whole line on its own,
# so a number claimed by one rule can be reported again by a later rule.
REFERENCE_PATTERNS: tuple[ReferencePattern, ...] = (
    ReferencePattern(
        name="contextual",
        regex=re.compile(
            r"(?:PR|issue|pull)\s*#([0-9]+)(?![A-Za-z0-9_])", re.IGNORECASE
        ),
        kind="issue",
    ),
    ReferencePattern(
        name="bare",
        regex=re.compile(r"(?<!\w)#(\d{1,6})(?!\w)", re.ASCII),
        kind="issue",
    ),
    ReferencePattern(
        name="work_item",
        regex=re.compile(
            r"(?:WI|US|Bug|Task|Feature|Epic)#([0-9]+)(?![A-Za-z0-9_])",
            re.IGNORECASE,
        ),
        kind="work_item",
    ),
)

ROOT_FOLDERS: tuple[str, ...] = (
    "src",
    "test",
    "lib",
    "dist",
    "out",
    "bin",
    "packages",
    "package",
    "apps",
    "app",
)

_PATH_BODY = r'[^\s:*?"<>|]+\.[a-zA-Z]{1,10}'

# Windows absolute, POSIX absolute, ./ relative, root-folder relative; each
# optionally followed by :line or :line:col.
FILE_PATH_RULE: re.Pattern[str] = re.compile(
    rf"(?P<path>(?:[A-Za-z]:\\|/){_PATH_BODY}"
    rf"|(?:\./|(?:{'|'.join(ROOT_FOLDERS)})/){_PATH_BODY})"
    r"(?::(?P<line>[0-9]+)(?::(?P<column>[0-9]+))?)?"
)


__all__ = [
    "FILE_PATH_RULE",
    "REFERENCE_PATTERNS",
    "ROOT_FOLDERS",
    "ReferencePattern",
]

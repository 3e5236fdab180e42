"""Reference and file path scanning for single lines of terminal output."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from links.models import LinkSpan
from rules.patterns import FILE_PATH_RULE, REFERENCE_PATTERNS
from utils import path_basename

if TYPE_CHECKING:
    from collections.abc import Sequence

    from links.models import LinkKind
    from rules.patterns import ReferencePattern

LOGGER = logging.getLogger(__name__)


def describe(kind: LinkKind, value: str, text: str) -> str:
    """Build the hover text shown for a link of the given kind."""
    if kind == "issue":
        return f"Open #{value} on GitHub"
    if kind == "work_item":
        return f"Open {text} in Azure DevOps"
    return f"Open {path_basename(value)}"


def scan_references(
    line: str,
    patterns: Sequence[ReferencePattern] = REFERENCE_PATTERNS,
) -> list[LinkSpan]:
    """Find reference spans, rule by rule in table order.

    Matches never overlap within one rule. Matches from different rules are
    all reported, so ``PR #99`` yields a contextual and a bare span.
    """
    spans: list[LinkSpan] = []
    for pattern in patterns:
        for match in pattern.regex.finditer(line):
            text = match.group(0)
            value = match.group(1)
            spans.append(
                LinkSpan(
                    start=match.start(),
                    length=len(text),
                    kind=pattern.kind,
                    text=text,
                    value=value,
                    tooltip=describe(pattern.kind, value, text),
                )
            )
    return spans


def scan_file_paths(line: str) -> list[LinkSpan]:
    """Find file path spans with their optional ``:line:col`` suffix."""
    spans: list[LinkSpan] = []
    for match in FILE_PATH_RULE.finditer(line):
        text = match.group(0)
        path = match.group("path")
        line_number = match.group("line")
        column = match.group("column")
        spans.append(
            LinkSpan(
                start=match.start(),
                length=len(text),
                kind="file_path",
                text=text,
                value=path,
                tooltip=describe("file_path", path, text),
                line=int(line_number) if line_number else None,
                column=int(column) if column else None,
            )
        )
    return spans


def scan_line(line: str) -> list[LinkSpan]:
    """Return every link span in ``line``: references first, then file paths.

    No overlap resolution happens across kinds.
    """
    spans = scan_references(line) + scan_file_paths(line)
    if spans:
        LOGGER.debug("Found %d link span(s) in line of %d chars", len(spans), len(line))
    return spans


__all__ = ["describe", "scan_file_paths", "scan_line", "scan_references"]

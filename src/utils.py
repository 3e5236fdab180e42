"""Shared path utilities for terminal links."""

from __future__ import annotations

from pathlib import PureWindowsPath


def path_basename(path: str) -> str:
    """Return the final component of a path written with either separator.

    Examples:
        >>> path_basename("src/foo.ts")
        'foo.ts'
        >>> path_basename("C:\\\\Users\\\\dev\\\\file.ts")
        'file.ts'
    """
    # PureWindowsPath accepts both "/" and "\" as separators.
    return PureWindowsPath(path).name or path


def is_absolute_path(path: str) -> bool:
    """Return True for POSIX absolute paths and drive-letter Windows paths.

    Both shapes are treated as absolute regardless of the running platform,
    since terminal output may come from either.

    Examples:
        >>> is_absolute_path("/home/user/file.ts")
        True
        >>> is_absolute_path("C:\\\\Users\\\\file.ts")
        True
        >>> is_absolute_path("./src/file.ts")
        False
    """
    if path.startswith("/"):
        return True
    return PureWindowsPath(path).is_absolute()

"""Command-line interface for termlinks."""

from __future__ import annotations

import argparse
import io
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

import orjson
from pydantic import TypeAdapter

from host.console import ConsoleHost
from links.models import LinkAction, ShowWarning
from resolve.resolver import DEFAULT_ADO_URL, LinkResolver, perform
from rules.config import ConfigError, context_from_config, load_config
from scan.lines import scan_line

if TYPE_CHECKING:
    from collections.abc import Iterable

_ACTION_ADAPTER: TypeAdapter[LinkAction] = TypeAdapter(LinkAction)


def _add_common_paths(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--root",
        default=".",
        help="Workspace root holding termlinks.toml (default: .)",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="termlinks")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    scan_parser = subparsers.add_parser("scan", help="Scan text for links")
    scan_parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="File to scan (default: stdin)",
    )

    open_parser = subparsers.add_parser("open", help="Resolve and open a link")
    _add_common_paths(open_parser)
    open_parser.add_argument("text", help="Line of terminal text")
    open_parser.add_argument(
        "--index",
        type=int,
        default=0,
        help="Which detected link to open (default: 0)",
    )
    open_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the resolved action as JSON instead of performing it",
    )

    return parser


def _dumps(payload: object) -> str:
    return orjson.dumps(payload, option=orjson.OPT_SORT_KEYS).decode("utf-8")


def _write_spans(lines: Iterable[str], out: TextIO) -> int:
    count = 0
    for line_number, raw_line in enumerate(lines, 1):
        for span in scan_line(raw_line.rstrip("\r\n")):
            payload = span.model_dump()
            payload["line_number"] = line_number
            out.write(_dumps(payload))
            out.write("\n")
            count += 1
    return count


def _handle_scan(input_path: str) -> int:
    if input_path == "-":
        if isinstance(sys.stdin, io.TextIOWrapper):
            sys.stdin.reconfigure(errors="replace")
        _write_spans(sys.stdin, sys.stdout)
        return 0

    try:
        with Path(input_path).open(encoding="utf-8", errors="replace") as handle:
            _write_spans(handle, sys.stdout)
    except OSError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2
    return 0


def _handle_open(root: Path, text: str, index: int, *, dry_run: bool) -> int:
    spans = scan_line(text)
    if not 0 <= index < len(spans):
        sys.stderr.write(f"error: no link at index {index} ({len(spans)} found)\n")
        return 2

    try:
        config = load_config(root)
        resolver = LinkResolver(
            context_from_config(root),
            github_url=config.github.url,
            ado_url=config.ado.url if config.ado else DEFAULT_ADO_URL,
        )
        action = resolver.resolve(spans[index])
    except ConfigError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2

    if dry_run:
        sys.stdout.write(_dumps(_ACTION_ADAPTER.dump_python(action)))
        sys.stdout.write("\n")
    else:
        perform(action, ConsoleHost())

    return 1 if isinstance(action, ShowWarning) else 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.command == "scan":
        return _handle_scan(args.input)

    if args.command == "open":
        root = Path(args.root).expanduser().resolve()
        return _handle_open(root, args.text, args.index, dry_run=args.dry_run)

    raise AssertionError


if __name__ == "__main__":
    raise SystemExit(main())

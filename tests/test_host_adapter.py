from __future__ import annotations

import io
import os
from pathlib import Path

import pytest

from host.adapter import TerminalLinkProvider
from host.console import ConsoleHost
from links.models import (
    NoAction,
    OpenDocument,
    OpenExternal,
    Selection,
    ShowWarning,
    WorkTrackingIdentity,
)
from resolve.context import ResolutionContext
from resolve.resolver import perform
from rules.config import context_from_config
from scan.lines import scan_line


class _RecordingHost:
    def __init__(self) -> None:
        self.urls: list[str] = []
        self.documents: list[tuple[str, Selection | None]] = []
        self.warnings: list[str] = []

    def open_external(self, url: str) -> None:
        self.urls.append(url)

    def show_text_document(self, path: str, selection: Selection | None) -> None:
        self.documents.append((path, selection))

    def show_warning(self, message: str) -> None:
        self.warnings.append(message)


def _provider(
    host: _RecordingHost,
    *,
    repository: str | None = None,
    identity: WorkTrackingIdentity | None = None,
    roots: tuple[str, ...] = ("/workspace",),
) -> TerminalLinkProvider:
    context = ResolutionContext(
        repository=lambda: repository,
        work_tracking=lambda: identity,
        workspace_roots=lambda: roots,
    )
    return TerminalLinkProvider(context, host)


def test_provide_links_matches_scanner() -> None:
    provider = _provider(_RecordingHost())
    line = "PR #3 broke src/a.ts:4 see Bug#9"

    assert provider.provide_links(line) == scan_line(line)


def test_handle_issue_link_opens_url() -> None:
    host = _RecordingHost()
    provider = _provider(host, repository="owner/repo")
    span = provider.provide_links("Fixed #42")[0]

    action = provider.handle_link(span)

    assert isinstance(action, OpenExternal)
    assert host.urls == ["https://github.com/owner/repo/issues/42"]
    assert host.warnings == []


def test_handle_issue_link_without_repository_warns() -> None:
    host = _RecordingHost()
    provider = _provider(host)
    span = provider.provide_links("Fixed #42")[0]

    provider.handle_link(span)

    assert host.urls == []
    assert len(host.warnings) == 1
    assert "#42" in host.warnings[0]


def test_handle_work_item_link_opens_url() -> None:
    host = _RecordingHost()
    identity = WorkTrackingIdentity(organization="myorg", project="myproject")
    provider = _provider(host, identity=identity)
    span = provider.provide_links("US#999")[0]

    provider.handle_link(span)

    assert host.urls == ["https://dev.azure.com/myorg/myproject/_workitems/edit/999"]


def test_handle_work_item_link_without_identity_warns() -> None:
    host = _RecordingHost()
    provider = _provider(host)
    span = provider.provide_links("US#999")[0]

    provider.handle_link(span)

    assert host.urls == []
    assert len(host.warnings) == 1


@pytest.mark.skipif(os.name == "nt", reason="POSIX path joining.")
def test_handle_file_link_opens_document_at_line() -> None:
    host = _RecordingHost()
    provider = _provider(host)
    span = provider.provide_links("src/foo.ts:42")[0]

    provider.handle_link(span)

    assert host.documents == [
        ("/workspace/src/foo.ts", Selection(line=41, character=0))
    ]


def test_handle_file_link_without_roots_does_nothing() -> None:
    host = _RecordingHost()
    provider = _provider(host, roots=())
    span = provider.provide_links("src/foo.ts")[0]

    action = provider.handle_link(span)

    assert isinstance(action, NoAction)
    assert host.urls == []
    assert host.documents == []
    assert host.warnings == []


def test_same_link_handled_twice_acts_twice() -> None:
    host = _RecordingHost()
    provider = _provider(host, repository="owner/repo")
    span = provider.provide_links("#7")[0]

    provider.handle_link(span)
    provider.handle_link(span)

    assert host.urls == ["https://github.com/owner/repo/issues/7"] * 2


def test_perform_dispatches_each_action() -> None:
    host = _RecordingHost()

    perform(OpenExternal(url="https://example.com"), host)
    perform(OpenDocument(path="/x.py", selection=None), host)
    perform(ShowWarning(message="careful"), host)
    perform(NoAction(reason="nothing"), host)

    assert host.urls == ["https://example.com"]
    assert host.documents == [("/x.py", None)]
    assert host.warnings == ["careful"]


def test_console_host_writes_document_location() -> None:
    stdout = io.StringIO()
    console = ConsoleHost(stdout=stdout, stderr=io.StringIO())

    console.show_text_document("/x/a.py", Selection(line=41, character=4))
    console.show_text_document("/x/b.py", None)

    assert stdout.getvalue() == "/x/a.py:42:5\n/x/b.py\n"


def test_console_host_writes_warnings_to_stderr() -> None:
    stderr = io.StringIO()
    console = ConsoleHost(stdout=io.StringIO(), stderr=stderr)

    console.show_warning("No GitHub repository configured.")

    assert stderr.getvalue() == "warning: No GitHub repository configured.\n"


def test_console_host_prints_url_when_no_browser(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    opened: list[str] = []

    def fake_open(url: str) -> bool:
        opened.append(url)
        return False

    monkeypatch.setattr("host.console.webbrowser.open", fake_open)
    stdout = io.StringIO()
    console = ConsoleHost(stdout=stdout, stderr=io.StringIO())

    console.open_external("https://github.com/o/r/issues/1")

    assert opened == ["https://github.com/o/r/issues/1"]
    assert stdout.getvalue() == "https://github.com/o/r/issues/1\n"


def test_config_broken_after_scan_degrades_to_warning_and_no_op(
    tmp_path: Path,
) -> None:
    config_path = tmp_path / "termlinks.toml"
    config_path.write_text('[github]\nrepository = "owner/repo"', encoding="utf-8")
    host = _RecordingHost()
    provider = TerminalLinkProvider(context_from_config(tmp_path), host)
    issue = provider.provide_links("Fixed #42")[0]
    path = provider.provide_links("src/foo.ts")[0]

    config_path.write_text("not = [valid", encoding="utf-8")
    issue_action = provider.handle_link(issue)
    path_action = provider.handle_link(path)

    assert isinstance(issue_action, ShowWarning)
    assert isinstance(path_action, NoAction)
    assert host.urls == []
    assert host.documents == []
    assert len(host.warnings) == 1
    assert "#42" in host.warnings[0]

"""Shared pytest configuration and fixtures for all tests."""

from pathlib import Path

import pytest

from mdlinkcheck.api.LinkResult import LinkResult
from mdlinkcheck.api.OptionsBag import OptionsBag
from mdlinkcheck.utils.display.Display import Display


def pytest_configure(config):
    for marker in ("unit", "integration"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests (applied by location)")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def mdlinkcheck_home(tmp_path_factory, monkeypatch) -> Path:
    """Keep log files out of the real home directory."""
    home = tmp_path_factory.mktemp("mdlinkcheck_home")
    monkeypatch.setenv("MDLINKCHECK_HOME", str(home))
    return home


# =============================================================================
# Display / checker doubles
# =============================================================================


class RecordingDisplay(Display):
    """Display that records every call as ``(kind, text)``."""

    def __init__(self):
        self.lines: list[tuple[str, str]] = []

    def header(self, message: str, **kwargs) -> None:
        self.lines.append(("header", message))

    def link(self, result: LinkResult, show_status: bool = False, **kwargs) -> None:
        text = f"[{result.status.value}] {result.link}"
        if show_status:
            text += f" → Status: {result.status_code}"
            if result.err:
                text += f" {result.err}"
        self.lines.append(("link", text))

    def info(self, message: str, **kwargs) -> None:
        self.lines.append(("info", message))

    def warning(self, message: str, **kwargs) -> None:
        self.lines.append(("warning", message))

    def error(self, message: str, **kwargs) -> None:
        details = kwargs.get("details", "")
        self.lines.append(("error", f"{message} {details}".rstrip()))

    def kinds(self, kind: str) -> list[str]:
        return [text for k, text in self.lines if k == kind]


class FakeChecker:
    """Checker double returning canned results per document text.

    ``responses`` maps document text to a list of results or to an
    exception instance, which is raised instead.
    """

    def __init__(self, responses: dict[str, list[LinkResult] | Exception] | None = None):
        self.responses = responses or {}
        self.calls: list[tuple[str, OptionsBag]] = []

    async def check(self, markdown: str, options: OptionsBag) -> list[LinkResult]:
        self.calls.append((markdown, options))
        response = self.responses.get(markdown, [])
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def recording_display() -> RecordingDisplay:
    return RecordingDisplay()


@pytest.fixture
def markdown_tree(tmp_path: Path) -> Path:
    """Directory with three nested markdown files and two other files."""
    root = tmp_path / "docs"
    (root / "guide" / "deep").mkdir(parents=True)
    (root / "README.md").write_text("# Readme\n", encoding="utf-8")
    (root / "guide" / "intro.md").write_text("# Intro\n", encoding="utf-8")
    (root / "guide" / "deep" / "notes.md").write_text("# Notes\n", encoding="utf-8")
    (root / "guide" / "image.png").write_bytes(b"\x89PNG")
    (root / "notes.txt").write_text("not markdown\n", encoding="utf-8")
    return root


@pytest.fixture
def make_checker():
    """Factory for FakeChecker instances."""
    return FakeChecker

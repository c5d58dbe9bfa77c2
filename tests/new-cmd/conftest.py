"""Shared fixtures for new-command tests."""

import os
import sys

import pytest

# Ensure tests/new-cmd/ is on sys.path so test files can import the fakes
# unambiguously (avoids conftest module name collisions).
sys.path.insert(0, os.path.dirname(__file__))

from fake_archive import build_archive  # noqa: E402
from fake_downloader import FakeDownloader  # noqa: E402
from fake_process_runner import FakeProcessRunner  # noqa: E402


def pytest_collection_modifyitems(items):
    for item in items:
        if "new-cmd" in str(item.fspath) and not item.get_closest_marker("integration"):
            item.add_marker(pytest.mark.unit)


class RecordingOutput:
    """InstallerOutput stand-in that records every call."""

    def __init__(self, quiet=False, no_ansi=False):
        self.quiet = quiet
        self.no_ansi = no_ansi
        self.written = []
        self.infos = []
        self.comments = []
        self.warnings = []
        self.progress_lines = []

    def write(self, text):
        self.written.append(text)

    def info(self, message):
        self.infos.append(message)

    def comment(self, message):
        self.comments.append(message)

    def warn(self, message):
        self.warnings.append(message)

    def progress(self, text):
        self.progress_lines.append(text)


@pytest.fixture
def output():
    return RecordingOutput()


@pytest.fixture
def archive_bytes():
    return build_archive("magento2-2.4.0", {
        "composer.json": "{}",
        "pub/static/.htaccess": "deny",
        "generated/.gitkeep": "",
        "var/.gitkeep": "",
    })


@pytest.fixture
def fake_downloader(archive_bytes):
    return FakeDownloader(archive_bytes)


@pytest.fixture
def fake_runner():
    return FakeProcessRunner()

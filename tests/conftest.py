"""Shared fixtures for the linkifier tests."""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtCore import QCoreApplication  # noqa: E402


class FakeBuffer:
    """In-memory text surface that records which absolute rows were read."""

    def __init__(self, rows, display_offset=0):
        self.rows = list(rows)
        self.display_offset = display_offset
        self.reads = []

    @property
    def row_count(self):
        return len(self.rows)

    def row_text(self, absolute_row):
        self.reads.append(absolute_row)
        return self.rows[absolute_row]


class RecordingSink:
    def __init__(self):
        self.zones = []
        self.clear_count = 0

    def clear_all(self):
        self.clear_count += 1
        self.zones.clear()

    def add(self, zone):
        self.zones.append(zone)


@pytest.fixture(scope="session", autouse=True)
def qt_app():
    """Timers need a running Qt application object."""
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def make_buffer():
    return FakeBuffer


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def opened():
    """Collects URIs passed to the injected open-externally action."""
    return []


@pytest.fixture
def make_linkifier(sink, opened):
    from linkifier import Linkifier

    created = []

    def _make(rows, *, display_offset=0, settings=None, attach=True):
        buffer = FakeBuffer(rows, display_offset=display_offset)
        linkifier = Linkifier(buffer, open_external=opened.append, settings=settings)
        if attach:
            linkifier.attach(sink)
        created.append(linkifier)
        return linkifier, buffer

    yield _make
    for linkifier in created:
        linkifier.cancel()

"""Qt and pyte glue for hosting a Linkifier in a terminal widget."""

from __future__ import annotations

from typing import Any

from PySide6.QtCore import QObject
from pyte.screens import HistoryScreen

from linkifier.core.linkifier import Linkifier

from .buffer_accessor import PyteBufferAccessor
from .desktop import open_url_externally
from .mouse_zone_manager import MouseZoneManager


def create_terminal_linkifier(
    screen: HistoryScreen,
    *,
    settings: Any = None,
    parent: QObject | None = None,
) -> tuple[Linkifier, MouseZoneManager]:
    """Build an attached Linkifier over ``screen`` that opens unhandled links in the desktop browser."""
    linkifier = Linkifier(
        PyteBufferAccessor(screen),
        open_external=open_url_externally,
        settings=settings,
        parent=parent,
    )
    zone_manager = MouseZoneManager(parent=linkifier)
    linkifier.attach(zone_manager)
    return linkifier, zone_manager


__all__ = [
    "MouseZoneManager",
    "PyteBufferAccessor",
    "create_terminal_linkifier",
    "open_url_externally",
]

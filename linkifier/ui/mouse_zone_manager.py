"""Zone sink with cell hit testing for terminal widgets.

A terminal widget maps its mouse events to 1-based ``(col, row)`` cells and
forwards them here; the manager tracks the hovered zone and dispatches the
zone callbacks.
"""

from __future__ import annotations

from typing import Any, List, Optional

from PySide6.QtCore import QObject, Signal

from linkifier.core.zones import MouseZone


class MouseZoneManager(QObject):
    hoverChanged = Signal(bool)  # True while the pointer is over a zone

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._zones: List[MouseZone] = []
        self._hovered: Optional[MouseZone] = None

    def zones(self) -> list[MouseZone]:
        return list(self._zones)

    @property
    def hovered_zone(self) -> Optional[MouseZone]:
        return self._hovered

    def add(self, zone: MouseZone) -> None:
        self._zones.append(zone)

    def clear_all(self) -> None:
        self._set_hovered(None, None)
        self._zones.clear()

    def zone_at(self, col: int, row: int) -> Optional[MouseZone]:
        # Later zones sit on top of earlier ones.
        for zone in reversed(self._zones):
            if zone.contains(col, row):
                return zone
        return None

    def mouse_moved(self, event: Any, col: int, row: int) -> None:
        self._set_hovered(self.zone_at(col, row), event)

    def mouse_left(self) -> None:
        self._set_hovered(None, None)

    def clicked(self, event: Any, col: int, row: int) -> bool:
        zone = self.zone_at(col, row)
        if zone is None:
            return False
        zone.click_callback(event)
        return True

    def _set_hovered(self, zone: Optional[MouseZone], event: Any) -> None:
        previous = self._hovered
        if zone is previous:
            return
        self._hovered = zone
        if previous is not None:
            previous.leave_callback()
        if zone is not None:
            zone.hover_callback(event)
        if (previous is None) != (zone is None):
            self.hoverChanged.emit(zone is not None)

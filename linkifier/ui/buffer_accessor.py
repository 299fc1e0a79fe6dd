from __future__ import annotations

from typing import List, Optional, Sequence

from pyte.screens import HistoryScreen


class PyteBufferAccessor:
    """Row access over a pyte ``HistoryScreen``.

    Absolute rows run oldest to newest: ``history.top`` (scrolled off above the
    viewport), the live ``buffer`` rows, then ``history.bottom`` (scrolled off
    below while paging back). The viewport starts right after ``history.top``.
    """

    def __init__(self, screen: HistoryScreen) -> None:
        self._screen = screen

    @property
    def screen(self) -> HistoryScreen:
        return self._screen

    @screen.setter
    def screen(self, screen: HistoryScreen) -> None:
        # Terminals rebuild their screen on resize.
        self._screen = screen

    @property
    def display_offset(self) -> int:
        return self._sequence_length(self._history_top())

    @property
    def row_count(self) -> int:
        return self.display_offset + int(self._screen.lines) + self._sequence_length(self._history_bottom())

    def row_text(self, absolute_row: int) -> str:
        idx = int(absolute_row)
        if idx < 0:
            return ""
        top = self._history_top()
        top_len = self._sequence_length(top)
        if idx < top_len:
            return self._entry_to_text(self._entry_at(top, idx))
        idx -= top_len

        live_rows = int(self._screen.lines)
        if idx < live_rows:
            return self._entry_to_text(self._screen.buffer.get(idx, {}))
        idx -= live_rows

        return self._entry_to_text(self._entry_at(self._history_bottom(), idx))

    def lines(self) -> List[str]:
        """All rows, oldest to newest."""
        return [self.row_text(i) for i in range(self.row_count)]

    def _history_top(self) -> Optional[Sequence]:
        hist = getattr(self._screen, "history", None)
        return getattr(hist, "top", None)

    def _history_bottom(self) -> Optional[Sequence]:
        hist = getattr(self._screen, "history", None)
        return getattr(hist, "bottom", None)

    @staticmethod
    def _sequence_length(seq: Optional[Sequence]) -> int:
        if seq is None:
            return 0
        try:
            return len(seq)
        except TypeError:
            return 0

    @staticmethod
    def _entry_at(seq: Optional[Sequence], idx: int):
        if seq is None or idx < 0:
            return None
        try:
            return seq[idx]
        except IndexError:
            return None

    def _entry_to_text(self, entry) -> str:
        if entry is None:
            return ""
        if isinstance(entry, str):
            return entry.rstrip()
        if isinstance(entry, dict):
            cols = max(0, int(getattr(self._screen, "columns", 0)))
            chars: list[str] = []
            for col in range(cols):
                cell = entry.get(col)
                ch = getattr(cell, "data", None)
                chars.append(ch if isinstance(ch, str) and ch else " ")
            return "".join(chars).rstrip()
        return ""

from __future__ import annotations

from typing import Callable


class OutputRenderer:
    """Append-only line surface that stays pinned to the newest line.

    Lines may carry ANSI style markers. There is no line limit.
    """

    def __init__(self):
        self.lines: list[str] = []
        # 0 = pinned to bottom, >0 = lines scrolled up from the bottom
        self.scroll = 0
        self._listeners: list[Callable[[str], None]] = []

    def on_write(self, callback: Callable[[str], None]):
        self._listeners.append(callback)

    def write(self, text: str = ""):
        self.lines.append(text)
        self.scroll = 0
        for cb in self._listeners:
            cb(text)

    def write_lines(self, lines):
        for line in lines:
            self.write(line)

    def clear(self):
        self.lines = []
        self.scroll = 0

    def scroll_up(self, page: int, view_h: int):
        max_off = max(0, len(self.lines) - view_h)
        self.scroll = min(self.scroll + max(1, page), max_off)

    def scroll_down(self, page: int):
        self.scroll = max(0, self.scroll - max(1, page))

    def visible(self, view_h: int) -> list[str]:
        """Return the lines that fit in a pane of view_h rows at the current scroll."""
        end = len(self.lines) - self.scroll
        start = max(0, end - view_h)
        end = max(start, end)
        return self.lines[start:end]

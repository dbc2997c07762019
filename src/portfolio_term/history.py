class CommandHistory:
    """Append-only command history with an up/down browsing cursor.

    The cursor ranges over [0, len]; cursor == len means the user is typing
    fresh input rather than browsing an older entry.
    """

    def __init__(self):
        self._history: list[str] = []
        self._cursor = 0

    def __len__(self) -> int:
        return len(self._history)

    @property
    def entries(self) -> list[str]:
        return list(self._history)

    @property
    def cursor(self) -> int:
        return self._cursor

    def add(self, cmd: str):
        """Record a submitted command and leave browsing mode."""
        self._history.append(cmd)
        self._cursor = len(self._history)

    def navigate_up(self) -> str | None:
        """Move to an older entry. Returns it, or None when already at the oldest."""
        if self._cursor > 0:
            self._cursor -= 1
            return self._history[self._cursor]
        return None

    def navigate_down(self) -> str:
        """Move to a newer entry. Past the newest, returns "" and stops browsing."""
        if self._cursor < len(self._history) - 1:
            self._cursor += 1
            return self._history[self._cursor]
        self._cursor = len(self._history)
        return ""

class InputBuffer:
    """Single-line text field with a cursor.

    Backs the terminal's input line: insertion at the cursor, backspace,
    delete, cursor movement, and the Ctrl+U/Ctrl+K kills.
    """

    def __init__(self):
        self._text = ""
        self._cursor = 0

    @property
    def text(self) -> str:
        return self._text

    @property
    def cursor(self) -> int:
        return self._cursor

    def insert(self, s: str):
        self._text = self._text[: self._cursor] + s + self._text[self._cursor :]
        self._cursor += len(s)

    def backspace(self):
        if self._cursor > 0:
            self._text = self._text[: self._cursor - 1] + self._text[self._cursor :]
            self._cursor -= 1

    def delete(self):
        if self._cursor < len(self._text):
            self._text = self._text[: self._cursor] + self._text[self._cursor + 1 :]

    def move_left(self):
        self._cursor = max(0, self._cursor - 1)

    def move_right(self):
        self._cursor = min(len(self._text), self._cursor + 1)

    def move_home(self):
        self._cursor = 0

    def move_end(self):
        self._cursor = len(self._text)

    def kill_to_start(self):
        self._text = self._text[self._cursor :]
        self._cursor = 0

    def kill_to_end(self):
        self._text = self._text[: self._cursor]

    def set_text(self, text: str):
        """Replace the field value and put the cursor at the end."""
        self._text = text
        self._cursor = len(text)

    def clear(self) -> str:
        """Empty the field and return what it held."""
        text = self._text
        self.set_text("")
        return text

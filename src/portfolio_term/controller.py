from __future__ import annotations

from enum import Enum, auto
from typing import TYPE_CHECKING, Sequence

from portfolio_term.autocomplete import complete
from portfolio_term.commands import COMMAND_NAMES
from portfolio_term.history import CommandHistory
from portfolio_term.input_buffer import InputBuffer

if TYPE_CHECKING:
    from portfolio_term.dispatcher import CommandDispatcher


class Key(Enum):
    ENTER = auto()
    UP = auto()
    DOWN = auto()
    TAB = auto()


class InputController:
    """Owns the input field and history; interprets Enter, arrows and Tab."""

    def __init__(self, dispatcher: "CommandDispatcher",
                 names: Sequence[str] = COMMAND_NAMES):
        self.dispatcher = dispatcher
        self.names = tuple(names)
        self.field = InputBuffer()
        self.history = CommandHistory()

    def handle_key(self, key: Key):
        if key is Key.ENTER:
            self.submit()
        elif key is Key.UP:
            self.history_up()
        elif key is Key.DOWN:
            self.history_down()
        elif key is Key.TAB:
            self.complete()

    def submit(self):
        line = self.field.text.strip()
        if line:
            self.history.add(line)
            self.dispatcher.execute(line)
        self.field.clear()

    def history_up(self):
        entry = self.history.navigate_up()
        if entry is not None:
            self.field.set_text(entry)

    def history_down(self):
        self.field.set_text(self.history.navigate_down())

    def complete(self):
        result = complete(self.field.text, self.names)
        if result.text is not None:
            self.field.set_text(result.text)
        elif result.ambiguous:
            renderer = self.dispatcher.renderer
            self.dispatcher.echo_prompt(result.fragment)
            renderer.write("  ".join(result.matches))
            renderer.write("")

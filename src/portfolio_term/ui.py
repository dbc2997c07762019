from __future__ import annotations

import curses
from typing import TYPE_CHECKING

from portfolio_term.ansi import _build_attr, _init_color_pairs, parse_ansi, strip_ansi
from portfolio_term.controller import Key

if TYPE_CHECKING:
    from portfolio_term.content import ContentRepository
    from portfolio_term.controller import InputController
    from portfolio_term.debug_log import DebugLogger
    from portfolio_term.output import OutputRenderer


class TerminalUI:
    """Curses front end: output pane, prompt/input line and status line."""

    STATUS_HINTS = "Tab complete | PgUp/PgDn scroll | Ctrl+C quit"

    def __init__(self, stdscr, controller: "InputController", renderer: "OutputRenderer",
                 repository: "ContentRepository | None" = None, prompt: str = "$",
                 color: bool = True, debug_logger: "DebugLogger | None" = None):
        self.stdscr = stdscr
        self.controller = controller
        self.renderer = renderer
        self.repository = repository
        self.prompt = prompt
        self.color_enabled = color
        self.debug_logger = debug_logger
        self._output_h = 1  # last known output pane height (updated during draw)

        curses.curs_set(1)
        if color:
            _init_color_pairs()
        else:
            curses.start_color()
            curses.use_default_colors()
        self.stdscr.timeout(25)
        self.stdscr.keypad(True)
        curses.mousemask(curses.ALL_MOUSE_EVENTS)

    def add_system_message(self, text: str):
        self.renderer.write(f"-- {text} --")

    def _layout(self):
        h, w = self.stdscr.getmaxyx()
        out_h = max(1, h - 2)
        out_win = curses.newwin(out_h, w, 0, 0)
        input_win = curses.newwin(1, w, h - 2, 0)
        status_win = curses.newwin(1, w, h - 1, 0)
        return out_win, input_win, status_win

    def _draw_output(self, win):
        win.erase()
        h, w = win.getmaxyx()
        for row, line in enumerate(self.renderer.visible(h)):
            if not self.color_enabled:
                try:
                    win.addnstr(row, 0, strip_ansi(line), w - 1)
                except curses.error:
                    pass
                continue
            col = 0
            for text, attr in parse_ansi(line):
                remaining = w - 1 - col
                if remaining <= 0:
                    break
                try:
                    win.addnstr(row, col, text, remaining, attr)
                except curses.error:
                    pass
                col += min(len(text), remaining)
        win.noutrefresh()

    def _status_text(self) -> str:
        status = self.STATUS_HINTS
        if self.repository is not None:
            if self.repository.failed:
                status += " | content unavailable"
            elif not self.repository.ready:
                status += " | loading"
        if self.renderer.scroll > 0:
            status += f" | SCROLL +{self.renderer.scroll}"
        if self.debug_logger and self.debug_logger.enabled:
            status += " | DBG"
        return status

    def draw(self):
        out_win, input_win, status_win = self._layout()
        self._output_h = out_win.getmaxyx()[0]
        self._draw_output(out_win)

        # Input line
        input_win.erase()
        field = self.controller.field
        lead = self.prompt + " "
        full = lead + field.text
        cursor_in_full = len(lead) + field.cursor
        _, w = input_win.getmaxyx()
        max_visible = w - 1
        # Slide the window so the cursor stays visible
        scroll_off = 0 if cursor_in_full < max_visible else cursor_in_full - max_visible + 1
        shown = full[scroll_off:scroll_off + max_visible]
        prompt_len = max(0, len(self.prompt) - scroll_off)
        prompt_attr = _build_attr(2, False) if self.color_enabled else 0  # green
        try:
            if prompt_len:
                input_win.addnstr(0, 0, shown[:prompt_len], max_visible, prompt_attr)
            if shown[prompt_len:]:
                input_win.addnstr(0, prompt_len, shown[prompt_len:], max_visible - prompt_len)
        except curses.error:
            pass
        input_win.noutrefresh()

        status_win.erase()
        try:
            status_win.addnstr(0, 0, self._status_text(), status_win.getmaxyx()[1] - 1,
                               curses.A_REVERSE)
        except curses.error:
            pass
        status_win.noutrefresh()

        # Cursor always returns to the input line
        try:
            self.stdscr.move(self.stdscr.getmaxyx()[0] - 2, cursor_in_full - scroll_off)
        except curses.error:
            pass

        curses.doupdate()

    def handle_key(self, ch: int):
        if ch == -1:
            return

        field = self.controller.field

        if ch == curses.KEY_MOUSE:
            # Clicking anywhere refocuses the input; draw() puts the cursor back
            try:
                curses.getmouse()
            except curses.error:
                pass
            return

        if ch == curses.KEY_PPAGE:
            self.renderer.scroll_up(self._output_h - 1, self._output_h)
            return
        if ch == curses.KEY_NPAGE:
            self.renderer.scroll_down(self._output_h - 1)
            return

        if ch in (curses.KEY_ENTER, 10, 13):
            self.controller.handle_key(Key.ENTER)
            return
        if ch == curses.KEY_UP:
            self.controller.handle_key(Key.UP)
            return
        if ch == curses.KEY_DOWN:
            self.controller.handle_key(Key.DOWN)
            return
        if ch == 9:
            self.controller.handle_key(Key.TAB)
            return

        if ch in (curses.KEY_BACKSPACE, 127, 8):
            field.backspace()
        elif ch == curses.KEY_DC:
            field.delete()
        elif ch == curses.KEY_LEFT:
            field.move_left()
        elif ch == curses.KEY_RIGHT:
            field.move_right()
        elif ch in (curses.KEY_HOME, 1):  # Ctrl+A
            field.move_home()
        elif ch in (curses.KEY_END, 5):  # Ctrl+E
            field.move_end()
        elif ch == 21:  # Ctrl+U
            field.kill_to_start()
        elif ch == 11:  # Ctrl+K
            field.kill_to_end()
        elif 0 <= ch < 256 and chr(ch).isprintable():
            field.insert(chr(ch))

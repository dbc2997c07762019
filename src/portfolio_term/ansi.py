import curses
import re

_ANSI_SGR_RE = re.compile(r"\x1b\[([0-9;]*)m")

RESET = "\x1b[0m"

# Inline style markers used by command output
STYLES = {
    "success": "\x1b[1;32m",
    "info": "\x1b[36m",
    "command": "\x1b[33m",
    "prompt": "\x1b[32m",
}

# curses color index for the 8 standard ANSI colors
_ANSI_COLORS = [
    curses.COLOR_BLACK,
    curses.COLOR_RED,
    curses.COLOR_GREEN,
    curses.COLOR_YELLOW,
    curses.COLOR_BLUE,
    curses.COLOR_MAGENTA,
    curses.COLOR_CYAN,
    curses.COLOR_WHITE,
]


def styled(text: str, style: str) -> str:
    """Wrap text in the SGR marker for a named style."""
    return f"{STYLES[style]}{text}{RESET}"


def success(text: str) -> str:
    return styled(text, "success")


def info(text: str) -> str:
    return styled(text, "info")


def command(text: str) -> str:
    return styled(text, "command")


def prompt(text: str) -> str:
    return styled(text, "prompt")


def strip_ansi(text: str) -> str:
    """Remove all ANSI escape sequences from text."""
    return _ANSI_SGR_RE.sub("", text)


def _init_color_pairs():
    """Initialize one curses color pair per ANSI foreground color.

    Pair id = fg_index + 1 on the terminal's default background.
    """
    curses.start_color()
    curses.use_default_colors()
    for fg_idx, fg in enumerate(_ANSI_COLORS):
        try:
            curses.init_pair(fg_idx + 1, fg, -1)
        except curses.error:
            pass


def parse_ansi(text: str):
    """Split a line into (plain_text, curses_attr) segments.

    Output lines are self-contained: every style marker is closed by a reset
    on the same line, so no state carries over between lines.
    """
    segments = []
    last_end = 0
    fg, bold = 7, False

    for m in _ANSI_SGR_RE.finditer(text):
        before = text[last_end:m.start()]
        if before:
            segments.append((before, _build_attr(fg, bold)))
        last_end = m.end()

        params = m.group(1)
        codes = [int(c) for c in params.split(";") if c.isdigit()] if params else [0]
        for code in codes:
            if code == 0:
                fg, bold = 7, False
            elif code == 1:
                bold = True
            elif code == 22:
                bold = False
            elif 30 <= code <= 37:
                fg = code - 30
            elif code == 39:
                fg = 7

    remaining = text[last_end:]
    if remaining:
        segments.append((remaining, _build_attr(fg, bold)))
    return segments


def _build_attr(fg: int, bold: bool) -> int:
    attr = 0
    if fg != 7:
        try:
            attr = curses.color_pair(fg + 1)
        except curses.error:
            pass
    if bold:
        attr |= curses.A_BOLD
    return attr

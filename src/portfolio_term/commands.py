"""Command table for the portfolio terminal.

Every handler has the same contract: ``handler(args, snapshot) -> list[str]``.
``args`` are the (already lowercased) words after the command name and
``snapshot`` is the loaded content, or None while it is still loading.
Handlers are pure: they return lines and never touch the output surface.
"""

from __future__ import annotations

import math
import re
import time
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable

from portfolio_term.ansi import command, info, success
from portfolio_term.types import ContentSnapshot

Handler = Callable[[list[str], "ContentSnapshot | None"], list[str]]

LOADING = "Loading data..."

SKILL_COLUMNS = 3
SKILL_CELL_WIDTH = 30
HELP_USAGE_WIDTH = 20
PROJECT_SUMMARY_LEN = 80
MAX_ARTICLES = 5

LS_LISTING = "about.html  projects.html  articles.html  videos.html  contact.html"
HOME_DIR = "/home/portfolio"
USER = "root"

BANNER = [
    "   ▄████████ ▄██   ▄   ▀█████████▄     ▄████████    ▄████████ ",
    "  ███    ███ ███   ██▄   ███    ███   ███    ███   ███    ███ ",
    "  ███    █▀  ███▄▄▄███   ███    ███   ███    █▀    ███    ███ ",
    "  ███        ▀▀▀▀▀▀███  ▄███▄▄▄██▀   ▄███▄▄▄      ▄███▄▄▄▄██▀ ",
    "  ███        ▄██   ███ ▀▀███▀▀▀██▄  ▀▀███▀▀▀     ▀▀███▀▀▀▀▀   ",
    "  ███    █▄  ███   ███   ███    ██▄   ███    █▄  ▀███████████ ",
    "  ███    ███ ███   ███   ███    ███   ███    ███   ███    ███ ",
    "  ████████▀   ▀█████▀  ▄█████████▀    ██████████   ███    ███ ",
    "                                                    ███    ███ ",
    "        CYBERSECURITY PORTFOLIO - INTERACTIVE TERMINAL",
]


@dataclass(frozen=True)
class Command:
    name: str
    usage: str
    description: str
    handler: Handler
    clears: bool = False  # empty the output surface before writing


def _header(title: str) -> list[str]:
    return [success(title), ""]


def show_help(args, snapshot):
    lines = _header("Available Commands:")
    for cmd in COMMANDS:
        lines.append(f"  {command(cmd.usage.ljust(HELP_USAGE_WIDTH))} {cmd.description}")
    return lines


def show_about(args, snapshot):
    if snapshot is None or snapshot.about is None:
        return [LOADING]
    return _header("[+] About Me:") + [snapshot.about]


def skill_rows(skills, columns: int = SKILL_COLUMNS) -> list[list[int]]:
    """Column-major grid of flat indices into skills.

    With rows = ceil(len / columns), cell (r, c) holds index r + c * rows;
    cells past the end are left out, so trailing rows can be short.
    """
    rows = math.ceil(len(skills) / columns)
    grid = []
    for r in range(rows):
        grid.append([r + c * rows for c in range(columns) if r + c * rows < len(skills)])
    return grid


def show_skills(args, snapshot):
    if snapshot is None or snapshot.skills is None:
        return [LOADING]
    skills = snapshot.skills
    lines = _header("[+] Technical Skills:")
    for row in skill_rows(skills):
        lines.append("".join(f"  • {skills[i]}".ljust(SKILL_CELL_WIDTH) for i in row))
    return lines


_INDEX_RE = re.compile(r"[+-]?\d+", re.ASCII)


def _parse_index(args) -> int | None:
    """First argument as an int, or None if absent or not a plain ASCII integer.

    Underscores, non-ASCII digits and decimals ("1.5") are not numbers here.
    """
    if not args or not _INDEX_RE.fullmatch(args[0]):
        return None
    return int(args[0])


def show_projects(args, snapshot):
    if snapshot is None or snapshot.projects is None:
        return [LOADING]
    projects = snapshot.projects
    number = _parse_index(args)

    if number is None:
        lines = _header("[+] Projects:")
        for i, project in enumerate(projects, 1):
            lines.append(f"  {i}. {command(project.title)}")
            lines.append(f"     {project.description[:PROJECT_SUMMARY_LEN]}...")
            lines.append("")
        lines.append('Tip: Use "projects [number]" for detailed view')
        return lines

    if not 1 <= number <= len(projects):
        return [f"Project {number} not found. Available: 1-{len(projects)}"]

    project = projects[number - 1]
    lines = _header(f"[+] Project {number}: {project.title}")
    lines.append(f"{info('Description:')} {project.description}")
    if project.link:
        lines.append(f"{info('Link:')} {project.link}")
    return lines


def show_ctf(args, snapshot):
    if snapshot is None or snapshot.ctf is None:
        return [LOADING]
    lines = _header("[+] CTF Achievements:")
    for entry in snapshot.ctf:
        lines.append(f"  [{entry.date}] {command(entry.event)}")
        lines.append(f"  Rank: {entry.rank}")
        lines.append(f"  {entry.description}")
        lines.append("")
    return lines


def show_articles(args, snapshot):
    if snapshot is None or snapshot.articles is None:
        return [LOADING]
    lines = _header("[+] Recent Articles:")
    for i, article in enumerate(snapshot.articles[:MAX_ARTICLES], 1):
        lines.append(f"  {i}. {command(article.title)}")
        lines.append(f"     {article.date} • {article.read_time}")
        lines.append(f"     {article.link}")
        lines.append("")
    return lines


def show_contact(args, snapshot):
    if snapshot is None or snapshot.contact is None:
        return [LOADING]
    lines = _header("[+] Contact Information:")
    for key, value in snapshot.contact.items():
        lines.append(f"  {info(key.upper() + ':')} {value}")
    return lines


def clear_screen(args, snapshot):
    return []


def show_banner(args, snapshot):
    return [success(line) for line in BANNER]


def list_files(args, snapshot):
    return [LS_LISTING]


def print_working_dir(args, snapshot):
    return [HOME_DIR]


def whoami(args, snapshot):
    return [USER]


def format_date(t: float | None = None) -> str:
    """Local time in the style of a browser's Date.toString()."""
    lt = time.localtime(t)
    return time.strftime("%a %b %d %Y %H:%M:%S GMT%z (%Z)", lt)


def show_date(args, snapshot):
    return [format_date()]


def echo(args, snapshot):
    return [" ".join(args)]


COMMANDS: tuple[Command, ...] = (
    Command("help", "help", "Display this help message", show_help),
    Command("about", "about", "Show information about me", show_about),
    Command("skills", "skills", "List my technical skills", show_skills),
    Command("projects", "projects [number]",
            "Show projects (optional: specific project number)", show_projects),
    Command("ctf", "ctf", "Display CTF achievements", show_ctf),
    Command("articles", "articles", "List recent articles", show_articles),
    Command("contact", "contact", "Show contact information", show_contact),
    Command("clear", "clear", "Clear the terminal screen", clear_screen, clears=True),
    Command("banner", "banner", "Display ASCII banner", show_banner),
    Command("ls", "ls", "List files", list_files),
    Command("pwd", "pwd", "Print working directory", print_working_dir),
    Command("whoami", "whoami", "Display current user", whoami),
    Command("date", "date", "Show current date and time", show_date),
    Command("echo", "echo [text]", "Print text to terminal", echo),
)

COMMAND_TABLE = MappingProxyType({cmd.name: cmd for cmd in COMMANDS})
COMMAND_NAMES: tuple[str, ...] = tuple(cmd.name for cmd in COMMANDS)

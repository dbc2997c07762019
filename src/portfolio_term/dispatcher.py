from __future__ import annotations

from typing import TYPE_CHECKING, Mapping

from portfolio_term.ansi import prompt as prompt_style
from portfolio_term.commands import COMMAND_TABLE, Command

if TYPE_CHECKING:
    from portfolio_term.content import ContentRepository
    from portfolio_term.debug_log import DebugLogger
    from portfolio_term.output import OutputRenderer

DEFAULT_PROMPT = "root@portfolio:~$"


def parse_command(line: str) -> tuple[str, list[str]]:
    """Split a submitted line into (name, args).

    The whole line is lowercased first and split on single spaces, so
    argument casing is lost and repeated spaces yield empty arguments.
    """
    parts = line.lower().split(" ")
    return parts[0], parts[1:]


class CommandDispatcher:
    """Echoes a submitted line, runs its handler and renders the result."""

    def __init__(self, repository: "ContentRepository", renderer: "OutputRenderer",
                 prompt: str = DEFAULT_PROMPT,
                 commands: Mapping[str, Command] = COMMAND_TABLE,
                 logger: "DebugLogger | None" = None):
        self.repository = repository
        self.renderer = renderer
        self.prompt = prompt
        self.commands = commands
        self.logger = logger

    def echo_prompt(self, text: str):
        self.renderer.write(f"{prompt_style(self.prompt)} {text}")

    def execute(self, line: str):
        self.echo_prompt(line)
        name, args = parse_command(line)

        cmd = self.commands.get(name)
        if cmd is None:
            self.renderer.write(f"Command not found: {name}. Type 'help' for available commands.")
        else:
            try:
                lines = cmd.handler(args, self.repository.current())
            except Exception as e:
                if self.logger:
                    self.logger.log_error(f"Command '{name}' failed: {e!r}")
                lines = [f"Error: {name}: {e}"]
            else:
                if cmd.clears:
                    self.renderer.clear()
            self.renderer.write_lines(lines)

        self.renderer.write("")

from __future__ import annotations

import time

from portfolio_term.ansi import command, prompt as prompt_style
from portfolio_term.config import Config
from portfolio_term.content import ContentRepository
from portfolio_term.controller import InputController
from portfolio_term.debug_log import DebugLogger
from portfolio_term.dispatcher import CommandDispatcher
from portfolio_term.output import OutputRenderer
from portfolio_term.ui import TerminalUI


def welcome_lines(prompt: str) -> list[str]:
    return [
        f"{prompt_style(prompt)} Welcome to the interactive terminal!",
        f"Type {command('help')} to see available commands.",
        "",
    ]


def build_terminal(config: Config, logger: DebugLogger | None = None) -> InputController:
    """Wire repository, renderer, dispatcher and controller for a config.

    The content fetch is not started here; call ``repository.load()``.
    """
    renderer = OutputRenderer()
    if logger is not None:
        renderer.on_write(logger.log_output)
    repository = ContentRepository(config.content.source, logger=logger)
    dispatcher = CommandDispatcher(repository, renderer,
                                   prompt=config.terminal.prompt, logger=logger)
    if config.terminal.welcome:
        renderer.write_lines(welcome_lines(config.terminal.prompt))
    return InputController(dispatcher)


def run_client(stdscr, config: Config, debug: bool = False,
               logger: DebugLogger | None = None):
    if logger is None:
        logger = DebugLogger()
    if debug:
        logger.start()

    controller = build_terminal(config, logger)
    dispatcher = controller.dispatcher
    ui = TerminalUI(
        stdscr,
        controller,
        dispatcher.renderer,
        repository=dispatcher.repository,
        prompt=config.terminal.prompt,
        color=config.ui.color,
        debug_logger=logger,
    )

    # Input is live immediately; data commands show a placeholder until this lands
    dispatcher.repository.load()
    ui.draw()

    try:
        while True:
            # getch blocks up to 25ms via timeout(), so the status line
            # picks up the content load finishing without a keypress
            ch = ui.stdscr.getch()
            ui.handle_key(ch)
            ui.draw()
    except KeyboardInterrupt:
        logger.stop()
        return
    except Exception as e:
        try:
            ui.add_system_message(f"Fatal error: {e}")
            ui.draw()
            time.sleep(2)
        finally:
            logger.stop()

import argparse
import curses
import sys

from portfolio_term import __version__
from portfolio_term.app import run_client
from portfolio_term.config import load_config
from portfolio_term.debug_log import DebugLogger


def report_errors(logger: DebugLogger, stream=None):
    """Print errors recorded during the session, once the screen is restored."""
    stream = stream or sys.stderr
    for message in logger.errors:
        print(f"\033[33mportfolio-term: {message}\033[0m", file=stream)


def main():
    p = argparse.ArgumentParser(description="Interactive portfolio terminal")
    p.add_argument("-v", "--version", action="version",
                   version=f"%(prog)s {__version__}")
    p.add_argument("-c", "--config", default="default",
                   help="Configuration name or path (searches ~/.portfolio-term/configs/, ./configs/, or use full path)")
    p.add_argument("--content", default=None, metavar="SOURCE",
                   help="Path or URL of the portfolio content JSON - overrides config")
    p.add_argument("--no-color", action="store_true", default=False,
                   help="Disable colored output (strip style markers)")
    p.add_argument("-d", "--debug", action="store_true", default=False,
                   help="Enable debug logging to term_*.log files in current directory")
    args = p.parse_args()

    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        p.error(str(e))

    # CLI arguments override config values
    if args.content is not None:
        config.content.source = args.content
    if args.no_color:
        config.ui.color = False

    logger = DebugLogger()
    try:
        curses.wrapper(run_client, config, debug=args.debug, logger=logger)
    finally:
        report_errors(logger)


if __name__ == "__main__":
    main()

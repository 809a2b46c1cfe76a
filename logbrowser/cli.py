#!/usr/bin/env python3
"""Command-line entry point for logbrowser.

Authenticates against AWS, fetches every CloudWatch Logs log group of the
selected region and either opens the full-screen browser or prints the
names as plain text (--plain).
"""

import argparse
import logging
import shutil
import sys
from typing import List, Optional, Sequence

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from . import __version__
from .config import BrowserConfig, load_config
from .errors import ConfigurationError, IdentityError, LogBrowserError
from .fetcher import LogGroupFetcher
from .plain import print_plain
from .session import create_session, logs_client, verify_identity
from .tui.browser_state import BrowserState
from .tui.items import log_group_items
from .tui.list_panel import ListPanel
from .tui.pt_display import PTDisplay
from .tui.styles import DEFAULT_STYLES, ListStyles

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INTERRUPTED = 130


class LogBrowserApp:
    """Wires configuration, AWS session, fetcher and display together.

    The AWS client is only used during ``initialize()`` and ``fetch()``;
    the browser works purely on the fetched names.
    """

    def __init__(self, config: BrowserConfig, styles: ListStyles = DEFAULT_STYLES):
        self.config = config
        self.styles = styles
        self._client = None

    def initialize(self) -> None:
        """Create the AWS session and verify the caller identity.

        Raises:
            ConfigurationError: If the session cannot be configured.
            IdentityError: If the credentials are missing or invalid.
        """
        session = create_session(self.config)
        verify_identity(session)
        self._client = logs_client(session)

    def fetch(self) -> List[str]:
        """Fetch all log group names. Must be called after initialize()."""
        if self._client is None:
            raise RuntimeError("initialize() must be called before fetch()")
        return LogGroupFetcher(self._client).fetch()

    def run_interactive(self, names: Sequence[str]) -> BrowserState:
        """Open the full-screen browser over the fetched names."""
        width, height = shutil.get_terminal_size()
        state = BrowserState.initial(log_group_items(names), width=width, height=height)
        display = PTDisplay(state, ListPanel(self.config.title, self.styles))
        display.start()
        return display.run()

    def run_plain(self, names: Sequence[str]) -> None:
        """Print the fetched names one per line."""
        print_plain(names)


def configure_logging(config: BrowserConfig, console: Optional[Console] = None) -> None:
    """Configure the root logger.

    Logs go to the configured file when set, so the full-screen display is
    not disturbed; otherwise they are written to stderr through Rich.
    """
    level = getattr(logging, config.log_level, logging.WARNING)
    if config.log_file:
        handler: logging.Handler = logging.FileHandler(config.log_file, encoding="utf-8")
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    else:
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            rich_tracebacks=False,
        )
    logging.basicConfig(level=level, handlers=[handler], force=True)
    # botocore is very chatty at DEBUG
    logging.getLogger("botocore").setLevel(max(level, logging.INFO))


def report_error(error: LogBrowserError, console: Console, styles: ListStyles = DEFAULT_STYLES) -> int:
    """Print a fatal error and return the exit code to use.

    Configuration and credential problems are printed in the error style;
    other failures as a plain ``Error:`` line.
    """
    if isinstance(error, (ConfigurationError, IdentityError)):
        console.print(Text(str(error), style=styles.error))
    else:
        console.print(Text(f"Error: {error}"))
    return error.exit_code


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="logbrowser",
        description="Browse CloudWatch Logs log groups in the terminal",
    )
    parser.add_argument(
        "--env-file",
        default=None,
        help="Path to .env file (default: .env)"
    )
    parser.add_argument(
        "--region",
        type=str,
        help="AWS region (default: LOGBROWSER_REGION, AWS_REGION or eu-west-1)"
    )
    parser.add_argument(
        "--profile",
        type=str,
        help="AWS shared-config profile to use"
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Print log group names, one per line, instead of the interactive list"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    return parser


def run(argv: Optional[Sequence[str]] = None, err_console: Optional[Console] = None) -> int:
    """Run the tool and return the process exit code."""
    args = build_parser().parse_args(argv)
    err_console = err_console or Console(stderr=True)

    try:
        config = load_config(
            env_file=args.env_file,
            region=args.region,
            profile=args.profile,
            verbose=args.verbose,
        )
    except ConfigurationError as e:
        return report_error(e, err_console)

    configure_logging(config, err_console)
    app = LogBrowserApp(config)

    try:
        app.initialize()
        names = app.fetch()
        if args.plain:
            app.run_plain(names)
        else:
            app.run_interactive(names)
    except LogBrowserError as e:
        logger.debug("Exiting after fatal error", exc_info=True)
        return report_error(e, err_console, app.styles)
    except KeyboardInterrupt:
        return EXIT_INTERRUPTED

    return EXIT_OK


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()

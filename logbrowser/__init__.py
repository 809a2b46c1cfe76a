"""
logbrowser - terminal browser for CloudWatch Logs log groups.

Public API re-exported from the internal modules.
"""

__version__ = "0.1.0"

# Configuration and errors
from .config import BrowserConfig, load_config
from .errors import (
    LogBrowserError,
    ConfigurationError,
    IdentityError,
    FetchError,
    TerminalSessionError,
)

# AWS access
from .session import create_session, verify_identity, logs_client
from .fetcher import LogGroupFetcher, fetch_log_group_names

# Browser
from .tui import (
    BrowserMode,
    BrowserState,
    Effect,
    KeyPress,
    Paste,
    Resize,
    reduce,
    filter_indices,
    LogGroupItem,
    Renderable,
    ListStyles,
    ListPanel,
    PTDisplay,
)

__all__ = [
    "__version__",

    # Configuration and errors
    "BrowserConfig",
    "load_config",
    "LogBrowserError",
    "ConfigurationError",
    "IdentityError",
    "FetchError",
    "TerminalSessionError",

    # AWS access
    "create_session",
    "verify_identity",
    "logs_client",
    "LogGroupFetcher",
    "fetch_log_group_names",

    # Browser
    "BrowserMode",
    "BrowserState",
    "Effect",
    "KeyPress",
    "Paste",
    "Resize",
    "reduce",
    "filter_indices",
    "LogGroupItem",
    "Renderable",
    "ListStyles",
    "ListPanel",
    "PTDisplay",
]

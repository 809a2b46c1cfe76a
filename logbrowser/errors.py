"""Error types for logbrowser.

Every fatal condition raised by the tool derives from LogBrowserError and
carries the process exit code the CLI should use when reporting it.
"""

from typing import List, Optional


class LogBrowserError(Exception):
    """Base class for all fatal logbrowser errors."""

    exit_code: int = 1


class ConfigurationError(LogBrowserError):
    """Raised when configuration or AWS session setup fails."""

    exit_code = 2

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        self.errors = errors or []
        super().__init__(message)

    @classmethod
    def from_errors(cls, errors: List[str]) -> "ConfigurationError":
        return cls(f"Configuration validation failed: {'; '.join(errors)}", errors)


class IdentityError(LogBrowserError):
    """Raised when the caller identity cannot be verified (bad credentials)."""

    exit_code = 3


class FetchError(LogBrowserError):
    """Raised when a page of log groups cannot be fetched."""

    def __init__(self, message: str, page: int):
        self.page = page
        super().__init__(message)


class TerminalSessionError(LogBrowserError):
    """Raised when the interactive screen cannot be started or run."""

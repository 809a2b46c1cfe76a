"""Configuration loading and validation for logbrowser.

Values come from the process environment, optionally seeded from a .env
file, with command-line overrides taking precedence.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from .errors import ConfigurationError

DEFAULT_REGION = "eu-west-1"
DEFAULT_TITLE = "CloudWatch Log Groups"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_ENV_FILE = ".env"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# Checked in order; the first non-empty variable wins.
REGION_VARS = ("LOGBROWSER_REGION", "AWS_REGION", "AWS_DEFAULT_REGION")
PROFILE_VARS = ("LOGBROWSER_PROFILE", "AWS_PROFILE")


@dataclass(frozen=True)
class BrowserConfig:
    """Resolved runtime configuration."""

    region: str = DEFAULT_REGION
    profile: Optional[str] = None
    title: str = DEFAULT_TITLE
    log_file: Optional[str] = None
    log_level: str = DEFAULT_LOG_LEVEL


def _first_env(names) -> Optional[str]:
    for name in names:
        value = os.environ.get(name, "").strip()
        if value:
            return value
    return None


def validate_config(config: BrowserConfig) -> List[str]:
    """Validate a resolved configuration.

    Args:
        config: The configuration to check.

    Returns:
        List of error messages, empty when the configuration is valid.
    """
    errors: List[str] = []

    if not config.region:
        errors.append("region must not be empty")
    elif any(ch.isspace() for ch in config.region):
        errors.append(f"Invalid region '{config.region}'")

    if config.log_level not in LOG_LEVELS:
        errors.append(
            f"Invalid log level '{config.log_level}'. Must be one of: {', '.join(LOG_LEVELS)}"
        )

    if config.log_file:
        parent = Path(config.log_file).expanduser().parent
        if not parent.is_dir():
            errors.append(f"Log file directory does not exist: {parent}")

    if not config.title.strip():
        errors.append("title must not be empty")

    return errors


def load_config(
    env_file: Optional[str] = None,
    region: Optional[str] = None,
    profile: Optional[str] = None,
    verbose: bool = False,
) -> BrowserConfig:
    """Load configuration from the environment and an optional .env file.

    Variables already present in the environment are never overridden by the
    .env file. Explicit arguments override both.

    Args:
        env_file: Path to a .env file. When omitted, .env in the current
            directory is read if present; an explicit path must exist.
        region: Region override (e.g. from --region).
        profile: Profile override (e.g. from --profile).
        verbose: Force DEBUG logging.

    Returns:
        The resolved BrowserConfig.

    Raises:
        ConfigurationError: If any value is invalid.
    """
    errors: List[str] = []
    if env_file is None:
        if Path(DEFAULT_ENV_FILE).is_file():
            load_dotenv(DEFAULT_ENV_FILE)
    else:
        env_path = Path(env_file).expanduser()
        if env_path.is_file():
            load_dotenv(env_path)
        else:
            errors.append(f"Env file not found: {env_path}")

    log_level = "DEBUG" if verbose else (
        os.environ.get("LOGBROWSER_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    )

    config = BrowserConfig(
        region=region or _first_env(REGION_VARS) or DEFAULT_REGION,
        profile=profile or _first_env(PROFILE_VARS),
        title=os.environ.get("LOGBROWSER_TITLE", DEFAULT_TITLE),
        log_file=_first_env(("LOGBROWSER_LOG_FILE",)),
        log_level=log_level,
    )

    errors.extend(validate_config(config))
    if errors:
        raise ConfigurationError.from_errors(errors)
    return config

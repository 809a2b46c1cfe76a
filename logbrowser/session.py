"""AWS session setup and caller identity verification."""

import logging
from typing import Any, Dict

import boto3
from botocore.exceptions import BotoCoreError, ClientError, ProfileNotFound

from .config import BrowserConfig
from .errors import ConfigurationError, IdentityError

logger = logging.getLogger(__name__)


def create_session(config: BrowserConfig) -> boto3.Session:
    """Create a boto3 session for the configured profile and region.

    Raises:
        ConfigurationError: If the profile does not exist or botocore
            rejects the session configuration.
    """
    try:
        session = boto3.Session(profile_name=config.profile, region_name=config.region)
    except ProfileNotFound as e:
        raise ConfigurationError(f"AWS profile not found: {config.profile}") from e
    except BotoCoreError as e:
        raise ConfigurationError(f"Failed to load AWS configuration: {e}") from e

    logger.debug(
        "Created AWS session (profile=%s, region=%s)",
        config.profile or "default", session.region_name,
    )
    return session


def verify_identity(session: boto3.Session) -> Dict[str, Any]:
    """Check that the session's credentials resolve to a valid identity.

    Returns:
        Dict with 'account' and 'arn' of the caller.

    Raises:
        IdentityError: If the credentials are missing or rejected.
    """
    try:
        response = session.client("sts").get_caller_identity()
    except (ClientError, BotoCoreError) as e:
        raise IdentityError(f"Bad AWS Credentials: {e}") from e

    identity = {"account": response.get("Account"), "arn": response.get("Arn")}
    logger.info("Authenticated as %s (account %s)", identity["arn"], identity["account"])
    return identity


def logs_client(session: boto3.Session):
    """Return a CloudWatch Logs client for the session."""
    return session.client("logs")

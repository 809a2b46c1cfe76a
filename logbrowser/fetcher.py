"""Fetches the complete list of log group names from CloudWatch Logs."""

import logging
from typing import List

from botocore.exceptions import BotoCoreError, ClientError

from .errors import FetchError

logger = logging.getLogger(__name__)


class LogGroupFetcher:
    """Accumulates every page of ``describe_log_groups`` into one list.

    Pages are requested sequentially until the paginator is exhausted. A
    failure on any page aborts the whole fetch: no partial list is returned
    and nothing is retried.
    """

    def __init__(self, client):
        """Initialize the fetcher.

        Args:
            client: An authenticated boto3 CloudWatch Logs client.
        """
        self._client = client

    def fetch(self) -> List[str]:
        """Fetch all log group names in arrival order.

        Returns:
            Log group names, first page first. Duplicates are kept.

        Raises:
            FetchError: If any page request fails.
        """
        names: List[str] = []
        page_number = 0

        paginator = self._client.get_paginator("describe_log_groups")
        try:
            for page in paginator.paginate():
                page_number += 1
                groups = page.get("logGroups", [])
                names.extend(group["logGroupName"] for group in groups)
                logger.debug("Fetched page %d (%d log groups)", page_number, len(groups))
        except (ClientError, BotoCoreError) as e:
            failed_page = page_number + 1
            logger.debug("Failed to fetch page %d: %s", failed_page, e)
            raise FetchError(f"failed to list log groups, {e}", page=failed_page) from e

        logger.info("Fetched %d log groups in %d pages", len(names), page_number)
        return names


def fetch_log_group_names(client) -> List[str]:
    """Convenience wrapper around LogGroupFetcher.fetch()."""
    return LogGroupFetcher(client).fetch()

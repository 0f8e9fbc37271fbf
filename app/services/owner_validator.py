"""
Owner existence checks against the user service.

``HttpOwnerValidator`` reduces a ``GET {base_url}/{owner_id}`` call to a
boolean.  It fails closed: error statuses, unreadable bodies and transport
failures all read as "owner does not exist", so callers never see an
exception from it.
"""

import logging
from typing import Protocol

import httpx

logger = logging.getLogger(__name__)


class OwnerExistenceChecker(Protocol):
    """Anything that can tell whether an owner is known."""

    def exists(self, owner_id: int) -> bool:
        ...


class HttpOwnerValidator:
    """Checks owners through the user service's ``/{owner_id}`` resource."""

    def __init__(self, client: httpx.Client, base_url: str) -> None:
        self._client = client
        self._base_url = base_url.rstrip("/")

    def exists(self, owner_id: int) -> bool:
        url = f"{self._base_url}/{owner_id}"
        logger.info("Validating user existence for User ID: %s", owner_id)
        try:
            response = self._client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(
                "I/O error while validating user existence for User ID %s. URL: %s. Error: %s",
                owner_id, url, e
            )
            return False

        if response.status_code != httpx.codes.OK:
            logger.error(
                "User service answered %s for User ID %s. URL: %s",
                response.status_code, owner_id, url
            )
            return False

        try:
            response.json()
        except ValueError:
            logger.error("Malformed user service response for User ID %s. URL: %s", owner_id, url)
            return False

        return True

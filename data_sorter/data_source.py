# ==============================================
# Users Data Source
# ==============================================
#
# PURPOSE:
#   HTTP client for the public users dataset (DummyJSON by default).
#   The core never fetches; the presentation shell calls this once at
#   startup and hands the result to RecordStore / AppState.
#
# USAGE EXAMPLES:
# ---------------
# 1. Decoded users:
#    client = UsersApiClient()
#    users = client.fetch_users()          # list[dict]
#
# 2. Editable JSON text:
#    text = client.fetch_users_text()      # pretty-printed array
#
# 3. Custom endpoint:
#    config = AppConfig(data_source=DataSourceConfig(url="http://localhost:8000/users"))
#    client = UsersApiClient(config)
#
# ==============================================

import json
import logging
import requests
from typing import Optional

from data_sorter.config import AppConfig, get_config
from data_sorter.errors import FetchError

logger = logging.getLogger(__name__)


class UsersApiClient:
    """
    Single-shot fetch of the `users` array. No retries.
    """

    def __init__(self, config: Optional[AppConfig] = None):
        """
        Args:
            config: Optional configuration. If None, loads from environment.
        """
        self._config = config or get_config()
        self._url = self._config.data_source.url
        self._timeout = self._config.data_source.timeout_seconds
        self._limit = self._config.data_source.limit

    @property
    def url(self) -> str:
        return self._url

    def fetch_users(self) -> list:
        """
        GET the endpoint and return its `users` array.

        Returns:
            List of raw user objects

        Raises:
            FetchError: network failure, non-2xx status, invalid JSON,
                        or a payload without a `users` list
        """
        params = {"limit": self._limit} if self._limit is not None else None
        logger.info("Fetching users from %s", self._url)

        try:
            response = requests.get(self._url, params=params, timeout=self._timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            logger.warning("Error fetching users: %s", e)
            raise FetchError(self._url) from e
        except ValueError as e:
            logger.warning("Users endpoint returned invalid JSON: %s", e)
            raise FetchError(self._url) from e

        users = payload.get("users") if isinstance(payload, dict) else None
        if not isinstance(users, list):
            logger.warning("Users endpoint payload has no 'users' array")
            raise FetchError(self._url)

        logger.info("Fetched %d users (HTTP %s)", len(users), response.status_code)
        return users

    def fetch_users_text(self) -> str:
        """Fetch users and return them as pretty-printed JSON."""
        return json.dumps(self.fetch_users(), indent=2, ensure_ascii=False)

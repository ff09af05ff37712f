"""
GitHub REST API client for listing a user's public repositories.

API Endpoint: GET {base_url}/users/{username}/repos
"""

import logging
import re
from typing import Optional

import httpx

from shared.exceptions import ExternalServiceError

from .exceptions import GitHubUserNotFoundError
from .models import GitHubRepository

logger = logging.getLogger(__name__)

# GitHub logins: alphanumerics and single hyphens, at most 39 chars
USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9](?:[A-Za-z0-9]|-(?=[A-Za-z0-9])){0,38}$")


class GitHubClient:
    """Fetches public repositories from GitHub."""

    def __init__(
        self,
        base_url: str = "https://api.github.com",
        token: Optional[str] = None,
        repo_limit: int = 5,
        timeout: float = 10.0,
    ):
        self._base_url = base_url.rstrip("/")
        self._token = token
        self._repo_limit = repo_limit
        self._timeout = timeout

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": "devconnect-api",
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    async def list_repositories(self, username: str) -> list[GitHubRepository]:
        """
        Get the user's most recently created public repositories.

        Raises:
            GitHubUserNotFoundError: If the user does not exist
            ExternalServiceError: If GitHub cannot be reached or errors
        """
        if not USERNAME_PATTERN.match(username):
            raise GitHubUserNotFoundError(username)

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(
                    f"{self._base_url}/users/{username}/repos",
                    params={
                        "per_page": self._repo_limit,
                        "sort": "created",
                        "direction": "desc",
                    },
                    headers=self._headers(),
                )
        except httpx.HTTPError as e:
            raise ExternalServiceError(f"GitHub request failed: {e}", service="github")

        if response.status_code == 404:
            raise GitHubUserNotFoundError(username)
        if response.status_code != 200:
            logger.warning(f"GitHub returned {response.status_code} for {username}")
            raise ExternalServiceError(
                f"GitHub returned {response.status_code}",
                service="github",
                details={"status_code": response.status_code},
            )

        return [GitHubRepository(**repo) for repo in response.json()]

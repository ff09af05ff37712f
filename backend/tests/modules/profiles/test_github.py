"""Tests for the GitHub repository client."""

import httpx
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from modules.profiles.exceptions import GitHubUserNotFoundError
from modules.profiles.github import GitHubClient
from shared.exceptions import ExternalServiceError


def repo_json(repo_id: int = 1, name: str = "devconnect") -> dict:
    return {
        "id": repo_id,
        "name": name,
        "full_name": f"ann/{name}",
        "html_url": f"https://github.com/ann/{name}",
        "description": "A social network for developers",
        "language": "Python",
        "stargazers_count": 3,
        "watchers_count": 3,
        "forks_count": 1,
        "owner": {"login": "ann"},
    }


def mock_github(response=None, error=None):
    """Patch httpx.AsyncClient; returns (patcher, client instance)."""
    mock_client_instance = AsyncMock()
    if error is not None:
        mock_client_instance.get.side_effect = error
    else:
        mock_client_instance.get.return_value = response

    patcher = patch("httpx.AsyncClient")
    mock_client_class = patcher.start()
    mock_client_class.return_value.__aenter__.return_value = mock_client_instance
    mock_client_class.return_value.__aexit__.return_value = None
    return patcher, mock_client_instance


def make_response(status_code: int, payload=None) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    return response


class TestListRepositories:
    @pytest.mark.asyncio
    async def test_returns_repositories(self):
        patcher, client = mock_github(make_response(200, [repo_json(1), repo_json(2, "blog")]))
        try:
            repos = await GitHubClient(repo_limit=5).list_repositories("ann")
        finally:
            patcher.stop()

        assert [r.name for r in repos] == ["devconnect", "blog"]
        assert repos[0].html_url == "https://github.com/ann/devconnect"

    @pytest.mark.asyncio
    async def test_request_shape(self):
        patcher, client = mock_github(make_response(200, []))
        try:
            await GitHubClient(base_url="https://gh.test/", token="ghp_x", repo_limit=5).list_repositories("ann")
        finally:
            patcher.stop()

        args, kwargs = client.get.call_args
        assert args[0] == "https://gh.test/users/ann/repos"
        assert kwargs["params"] == {"per_page": 5, "sort": "created", "direction": "desc"}
        assert kwargs["headers"]["Authorization"] == "Bearer ghp_x"

    @pytest.mark.asyncio
    async def test_no_token_sends_no_authorization(self):
        patcher, client = mock_github(make_response(200, []))
        try:
            await GitHubClient().list_repositories("ann")
        finally:
            patcher.stop()

        assert "Authorization" not in client.get.call_args.kwargs["headers"]

    @pytest.mark.asyncio
    async def test_unknown_user(self):
        patcher, _ = mock_github(make_response(404, {"message": "Not Found"}))
        try:
            with pytest.raises(GitHubUserNotFoundError) as exc_info:
                await GitHubClient().list_repositories("ghost")
        finally:
            patcher.stop()

        assert exc_info.value.message == "No Github profile found"

    @pytest.mark.asyncio
    async def test_invalid_username_skips_request(self):
        patcher, client = mock_github(make_response(200, []))
        try:
            with pytest.raises(GitHubUserNotFoundError):
                await GitHubClient().list_repositories("../../etc")
        finally:
            patcher.stop()

        client.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_rate_limited(self):
        patcher, _ = mock_github(make_response(403, {"message": "rate limit"}))
        try:
            with pytest.raises(ExternalServiceError) as exc_info:
                await GitHubClient().list_repositories("ann")
        finally:
            patcher.stop()

        assert exc_info.value.details["service"] == "github"

    @pytest.mark.asyncio
    async def test_network_failure(self):
        patcher, _ = mock_github(error=httpx.ConnectError("connection refused"))
        try:
            with pytest.raises(ExternalServiceError):
                await GitHubClient().list_repositories("ann")
        finally:
            patcher.stop()

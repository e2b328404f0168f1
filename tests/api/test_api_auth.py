"""Tests for Auth API."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from smartdash_cli.models.exceptions import ServerError
from smartdash_cli.services.api.auth import AuthAPI
from smartdash_cli.services.api.client import APIClient


@pytest.fixture
def mock_client():
    """Create a mock API client."""
    client = MagicMock(spec=APIClient)
    client.post = AsyncMock()
    return client


@pytest.mark.asyncio
async def test_login(mock_client):
    """Test login."""
    mock_response = MagicMock()
    mock_response.json.return_value = {"token": "test_token"}
    mock_client.post.return_value = mock_response

    auth_api = AuthAPI(mock_client)
    result = await auth_api.login("test@example.com", "password")

    assert result["token"] == "test_token"
    mock_client.post.assert_called_once_with(
        "/auth/login",
        json={"email": "test@example.com", "password": "password"},
    )


@pytest.mark.asyncio
async def test_login_non_object_body(mock_client):
    mock_response = MagicMock()
    mock_response.json.return_value = ["token"]
    mock_client.post.return_value = mock_response

    with pytest.raises(ServerError):
        await AuthAPI(mock_client).login("a@b.c", "pw")


@pytest.mark.asyncio
async def test_login_non_json_body(mock_client):
    mock_response = MagicMock()
    mock_response.json.side_effect = ValueError("no json")
    mock_client.post.return_value = mock_response

    with pytest.raises(ServerError, match="not JSON"):
        await AuthAPI(mock_client).login("a@b.c", "pw")


@pytest.mark.asyncio
async def test_signup_with_note(mock_client):
    await AuthAPI(mock_client).signup("Ana", "ana@example.com", "secret1", note="hello")

    mock_client.post.assert_called_once_with(
        "/auth/signup",
        json={
            "name": "Ana",
            "email": "ana@example.com",
            "password": "secret1",
            "note": "hello",
        },
    )


@pytest.mark.asyncio
async def test_signup_without_note_omits_it(mock_client):
    await AuthAPI(mock_client).signup("Ana", "ana@example.com", "secret1")

    body = mock_client.post.call_args.kwargs["json"]
    assert "note" not in body

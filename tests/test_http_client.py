"""
Tests for the scoped HTTP client, using a mocked aiohttp session.
"""

from unittest.mock import AsyncMock, MagicMock
import aiohttp
import pytest

from tolgee_translation.exceptions import HttpStatusError
from tolgee_translation.provider.http import ApiResponse, ScopedHttpClient


def mock_session(status=200, text=""):
    response = MagicMock()
    response.status = status
    response.text = AsyncMock(return_value=text)

    session = MagicMock()
    session.closed = False
    session.close = AsyncMock()
    session.request.return_value.__aenter__.return_value = response
    return session


def test_build_url_joins_paths():
    client = ScopedHttpClient("https://app.tolgee.io/v2/projects/1/")

    assert client.build_url("import") == "https://app.tolgee.io/v2/projects/1/import"
    assert client.build_url("/keys") == "https://app.tolgee.io/v2/projects/1/keys"


def test_build_form_has_one_part_per_file():
    form = ScopedHttpClient.build_form([
        ("files", "en.json", b"{}", "application/json"),
        ("files", "fr.json", b"{}", "application/json"),
    ])

    assert isinstance(form, aiohttp.FormData)
    assert len(form._fields) == 2


@pytest.mark.asyncio
async def test_request_drops_empty_query_values():
    session = mock_session(text='{"nextCursor": null}')
    client = ScopedHttpClient("https://app.tolgee.io/v2/projects/1", headers={"X-API-Key": "k"}, session=session)

    response = await client.request("GET", "translations", params={"size": 2000, "cursor": None})

    args, kwargs = session.request.call_args
    assert args == ("GET", "https://app.tolgee.io/v2/projects/1/translations")
    assert kwargs["params"] == {"size": "2000"}
    assert kwargs["headers"] == {"X-API-Key": "k"}
    assert response.status == 200
    assert response.json() == {"nextCursor": None}


@pytest.mark.asyncio
async def test_request_sends_json_body():
    session = mock_session(status=400, text="bad")
    client = ScopedHttpClient("https://app.tolgee.io/v2/projects/1", session=session)

    response = await client.request("DELETE", "keys", json=[1, 2])

    assert session.request.call_args.kwargs["json"] == [1, 2]
    assert not response.ok
    assert response.body == "bad"


@pytest.mark.asyncio
async def test_close_leaves_injected_session_open():
    session = mock_session()
    client = ScopedHttpClient("https://app.tolgee.io/v2/projects/1", session=session)

    await client.close()

    session.close.assert_not_called()


def test_raise_for_status():
    ApiResponse("GET", "https://x/translations", 200).raise_for_status()

    with pytest.raises(HttpStatusError) as exc_info:
        ApiResponse("DELETE", "https://x/import", 404).raise_for_status()

    assert exc_info.value.status == 404

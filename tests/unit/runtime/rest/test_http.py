"""Precise unit tests for HTTPClient.

Tests focus on session management, response decoding, and error mapping.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest
from aiohttp import web
from aiohttp import test_utils
from yarl import URL

from laakhay.gitlab import GitLabClient, GitLabConfig
from laakhay.gitlab.core import (
    AuthenticationError,
    MalformedResponseError,
    NotFoundError,
    ServiceError,
    TransportError,
)
from laakhay.gitlab.endpoints import IssuesQuery
from laakhay.gitlab.query import to_query_string
from laakhay.gitlab.runtime.rest import HTTPClient, RESTResponse


def _mock_response(status: int = 200, text: str = "", headers: dict | None = None) -> MagicMock:
    response = MagicMock()
    response.status = status
    response.headers = headers or {}
    response.text = AsyncMock(return_value=text)
    response.__aenter__ = AsyncMock(return_value=response)
    response.__aexit__ = AsyncMock(return_value=None)
    return response


def _client_with(response: MagicMock | None = None, **kwargs) -> tuple[HTTPClient, MagicMock]:
    client = HTTPClient(**kwargs)
    mock_session = MagicMock()
    mock_session.closed = False  # session property checks this
    mock_session.request = MagicMock(return_value=response)
    client._session = mock_session
    return client, mock_session


class TestHTTPClientSessionManagement:
    """Test HTTPClient session management."""

    def test_init(self):
        """Test HTTPClient initialization."""
        client = HTTPClient(timeout=10.0)
        assert client.timeout.total == 10.0
        assert client._session is None
        assert client.headers == {}

    def test_build_url(self):
        """Relative paths are joined to base_url; absolute URLs are kept."""
        client = HTTPClient(base_url="https://gitlab.example.com/api/v4")
        assert client.build_url("/issues") == "https://gitlab.example.com/api/v4/issues"
        assert client.build_url("https://other/x?page=2") == "https://other/x?page=2"

    @pytest.mark.asyncio
    async def test_session_property_creates_session(self):
        """Test session property creates session when needed."""
        client = HTTPClient()
        session = client.session
        assert isinstance(session, aiohttp.ClientSession)
        assert client._session is session
        await client.close()

    @pytest.mark.asyncio
    async def test_session_property_recreates_closed_session(self):
        """Test session property recreates closed session."""
        client = HTTPClient()
        session1 = client.session
        await session1.close()

        session2 = client.session
        assert session1 is not session2
        assert not session2.closed
        await client.close()

    @pytest.mark.asyncio
    async def test_close_idempotent(self):
        """Test close() can be called multiple times."""
        client = HTTPClient()
        await client.close()
        await client.close()  # Should not raise

    @pytest.mark.asyncio
    async def test_context_manager(self):
        """Test HTTPClient as async context manager."""
        async with HTTPClient() as client:
            assert client.session is not None

        assert client._session is None or client._session.closed


class TestHTTPClientRequests:
    """Test request dispatch and response decoding."""

    @pytest.mark.asyncio
    async def test_request_decodes_json_and_headers(self):
        response = _mock_response(200, '[{"id": 1}]', {"X-Next-Page": "2"})
        client, session = _client_with(
            response, base_url="https://gitlab.example.com/api/v4", headers={"PRIVATE-TOKEN": "t"}
        )

        result = await client.request("GET", "/issues", params=[("page", "1")])

        assert isinstance(result, RESTResponse)
        assert result.status == 200
        assert result.data == [{"id": 1}]
        assert result.header("x-next-page") == "2"
        session.request.assert_called_once_with(
            "GET",
            URL("https://gitlab.example.com/api/v4/issues?page=1", encoded=True),
            json=None,
            headers={"PRIVATE-TOKEN": "t"},
        )

    @pytest.mark.asyncio
    async def test_request_headers_merge(self):
        client, session = _client_with(_mock_response(200, "{}"), headers={"PRIVATE-TOKEN": "t"})

        await client.request("POST", "https://x/api", json_body={"a": 1}, headers={"X-A": "b"})

        kwargs = session.request.call_args.kwargs
        assert kwargs["headers"] == {"PRIVATE-TOKEN": "t", "X-A": "b"}
        assert kwargs["json"] == {"a": 1}

    @pytest.mark.asyncio
    async def test_empty_body_is_none(self):
        client, _ = _client_with(_mock_response(204, ""))
        result = await client.request("DELETE", "https://x/api/issues/1")
        assert result.data is None

    @pytest.mark.asyncio
    async def test_invalid_json_on_success(self):
        client, _ = _client_with(_mock_response(200, "<html>oops</html>"))
        with pytest.raises(MalformedResponseError):
            await client.request("GET", "https://x/api")


class TestHTTPClientErrors:
    """Test failure classification."""

    @pytest.mark.asyncio
    async def test_service_error_with_payload(self):
        client, _ = _client_with(_mock_response(500, '{"message": "Internal Server Error"}'))

        with pytest.raises(ServiceError) as exc_info:
            await client.request("GET", "https://x/api")

        assert exc_info.value.status_code == 500
        assert exc_info.value.payload == {"message": "Internal Server Error"}

    @pytest.mark.asyncio
    async def test_not_found(self):
        client, _ = _client_with(_mock_response(404, '{"message": "404 Not found"}'))
        with pytest.raises(NotFoundError):
            await client.request("GET", "https://x/api")

    @pytest.mark.asyncio
    async def test_unauthorized_text_payload(self):
        client, _ = _client_with(_mock_response(401, "Unauthorized"))
        with pytest.raises(AuthenticationError) as exc_info:
            await client.request("GET", "https://x/api")
        assert exc_info.value.payload == "Unauthorized"

    @pytest.mark.asyncio
    async def test_connection_error_is_transport_error(self):
        client, session = _client_with()
        session.request = MagicMock(side_effect=aiohttp.ClientConnectionError("refused"))

        with pytest.raises(TransportError) as exc_info:
            await client.request("GET", "https://x/api")

        assert isinstance(exc_info.value.__cause__, aiohttp.ClientConnectionError)

    @pytest.mark.asyncio
    async def test_timeout_is_transport_error(self):
        client, session = _client_with()
        session.request = MagicMock(side_effect=TimeoutError())

        with pytest.raises(TransportError):
            await client.request("GET", "https://x/api")


class TestHTTPClientHeaders:
    """Default headers carry the access token and stay on the API host."""

    @pytest.mark.asyncio
    async def test_token_not_sent_to_other_host(self):
        client, session = _client_with(
            _mock_response(200, "[]"),
            base_url="https://gitlab.example.com/api/v4",
            headers={"PRIVATE-TOKEN": "t"},
        )

        await client.request("GET", "https://cdn.example.net/api/v4/issues?cursor=abc")

        assert session.request.call_args.kwargs["headers"] is None

    @pytest.mark.asyncio
    async def test_per_call_headers_still_sent_to_other_host(self):
        client, session = _client_with(
            _mock_response(200, "[]"),
            base_url="https://gitlab.example.com/api/v4",
            headers={"PRIVATE-TOKEN": "t"},
        )

        await client.request("GET", "http://gitlab.example.com/api/v4/x", headers={"X-A": "b"})

        # scheme differs, so the origin differs
        assert session.request.call_args.kwargs["headers"] == {"X-A": "b"}

    @pytest.mark.asyncio
    async def test_token_sent_to_absolute_url_on_api_host(self):
        client, session = _client_with(
            _mock_response(200, "[]"),
            base_url="https://gitlab.example.com/api/v4",
            headers={"PRIVATE-TOKEN": "t"},
        )
        next_url = "https://gitlab.example.com/api/v4/projects/1/issues?cursor=abc"

        await client.request("GET", next_url)

        args, kwargs = session.request.call_args
        assert args[1] == URL(next_url, encoded=True)
        assert kwargs["headers"] == {"PRIVATE-TOKEN": "t"}


class TestHTTPClientWire:
    """The query string on the wire is the encoder's output, byte for byte."""

    @pytest.mark.asyncio
    async def test_encoded_query_reaches_server_unchanged(self):
        seen: list[tuple[str, str | None]] = []

        async def handler(request: web.Request) -> web.Response:
            seen.append((request.raw_path, request.headers.get("PRIVATE-TOKEN")))
            return web.json_response([], headers={"X-Next-Page": ""})

        app = web.Application()
        app.router.add_get("/api/v4/projects/{project}/issues", handler)

        query = IssuesQuery(labels=["x y", "z"], iids=[1, 2], search="a b&c")

        async with test_utils.TestServer(app) as server:
            config = GitLabConfig(
                base_url=str(server.make_url("/api/v4")), private_token="t", per_page=10
            )
            async with GitLabClient(config) as gl:
                assert await gl.issues.list_project("group/project", query) == []

        expected_query = to_query_string(query.encode() + (("page", "1"), ("per_page", "10")))
        assert expected_query.startswith(
            "labels=x%20y%2Cz&iids%5B%5D=1&iids%5B%5D=2&search=a%20b%26c"
        )
        assert seen == [(f"/api/v4/projects/group%2Fproject/issues?{expected_query}", "t")]

    def test_request_url_appends_to_existing_query(self):
        client = HTTPClient(base_url="https://gitlab.example.com/api/v4")
        url = client.request_url("/issues?scope=all", [("search", "a b")])
        assert str(url) == "https://gitlab.example.com/api/v4/issues?scope=all&search=a%20b"

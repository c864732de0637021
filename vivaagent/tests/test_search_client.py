"""
Tests for the Vivatech search API client.

The API is stubbed with httpx.MockTransport, so no network is used.
"""

import asyncio
import json
import time

import httpx
import pytest

from vivaagent.search.client import ConferenceSearchClient
from vivaagent.shared.config.settings import AppSettings
from vivaagent.shared.errors import (
    ConfigurationError,
    DeserializationError,
    SearchApiError,
    SearchStatusError,
    TransportError,
)


API_URL = "http://vivatech.test/query"


def _make_payload():
    """Create a search API response body for testing."""
    return {
        "answer": "Several AI sessions are scheduled.",
        "sources": [
            {
                "id": "session-42",
                "source_table": "sessions",
                "score": 0.93,
                "text_chunk": "AI keynote on June 12 in Hall 1",
            },
            {
                "id": "partner-7",
                "text_chunk": "Partner booth with robotics demos",
            },
        ],
        "metadata": {"search_mode": "hybrid", "sources_found": 2},
    }


def _make_client(handler, timeout_seconds=30.0):
    """Create a client whose requests are answered by handler."""
    return ConferenceSearchClient(
        API_URL,
        timeout_seconds=timeout_seconds,
        transport=httpx.MockTransport(handler),
    )


class TestSearchSuccess:
    """Tests for successful searches."""

    def test_returns_sources_in_api_order(self):
        client = _make_client(lambda request: httpx.Response(200, json=_make_payload()))

        sources = asyncio.run(client.search("AI"))

        assert [s.id for s in sources] == ["session-42", "partner-7"]
        assert sources[0].source_table == "sessions"
        assert sources[0].score == pytest.approx(0.93)

    def test_optional_fields_default(self):
        client = _make_client(lambda request: httpx.Response(200, json=_make_payload()))

        sources = asyncio.run(client.search("robots"))

        assert sources[1].source_table == ""
        assert sources[1].score == 0.0

    def test_posts_query_as_json(self):
        captured = []

        def handler(request):
            captured.append(request)
            return httpx.Response(200, json=_make_payload())

        asyncio.run(_make_client(handler).search("fintech"))

        assert len(captured) == 1
        assert captured[0].method == "POST"
        assert str(captured[0].url) == API_URL
        assert json.loads(captured[0].content) == {"query": "fintech"}

    def test_unused_fields_may_be_absent(self):
        """Only 'sources' is required in the body."""
        client = _make_client(
            lambda request: httpx.Response(200, json={"sources": []})
        )
        assert asyncio.run(client.search("anything")) == []

    def test_repeated_calls_are_independent(self):
        captured = []

        def handler(request):
            captured.append(request)
            return httpx.Response(200, json=_make_payload())

        client = _make_client(handler)
        first = asyncio.run(client.search("AI"))
        second = asyncio.run(client.search("AI"))

        assert first == second
        assert len(captured) == 2

    def test_from_settings(self):
        settings = AppSettings(search_api_url=API_URL, api_timeout_seconds=12)
        client = ConferenceSearchClient.from_settings(settings)
        assert client.api_url == API_URL
        assert client.timeout_seconds == 12.0


class TestSearchFailures:
    """Tests for each failure mode."""

    def test_missing_url_raises_configuration_error(self):
        client = ConferenceSearchClient(None)
        with pytest.raises(ConfigurationError):
            asyncio.run(client.search("AI"))

    def test_connection_failure_raises_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(TransportError, match="HTTP request failed"):
            asyncio.run(_make_client(handler).search("AI"))

    def test_timeout_raises_transport_error(self):
        def handler(request):
            raise httpx.ReadTimeout("too slow", request=request)

        with pytest.raises(TransportError, match="timed out"):
            asyncio.run(_make_client(handler, timeout_seconds=1.0).search("AI"))

    @pytest.mark.parametrize("status_code", [400, 404, 500, 503])
    def test_error_status_raises_status_error(self, status_code):
        client = _make_client(lambda request: httpx.Response(status_code, text="nope"))

        with pytest.raises(SearchStatusError) as exc_info:
            asyncio.run(client.search("AI"))

        assert exc_info.value.status_code == status_code
        assert isinstance(exc_info.value, TransportError)

    def test_non_json_body_raises_deserialization_error(self):
        client = _make_client(lambda request: httpx.Response(200, text="<html>oops</html>"))
        with pytest.raises(DeserializationError):
            asyncio.run(client.search("AI"))

    def test_missing_sources_raises_deserialization_error(self):
        client = _make_client(lambda request: httpx.Response(200, json={"answer": "x"}))
        with pytest.raises(DeserializationError):
            asyncio.run(client.search("AI"))

    def test_source_without_text_raises_deserialization_error(self):
        body = {"answer": "", "sources": [{"id": "s1"}], "metadata": {}}
        client = _make_client(lambda request: httpx.Response(200, json=body))
        with pytest.raises(DeserializationError):
            asyncio.run(client.search("AI"))

    def test_deserialization_error_is_not_transport_error(self):
        client = _make_client(lambda request: httpx.Response(200, text="[]"))
        with pytest.raises(SearchApiError) as exc_info:
            asyncio.run(client.search("AI"))
        assert not isinstance(exc_info.value, TransportError)


async def _search_slow_server(timeout_seconds, byte_interval):
    """
    Run a search against a local server that sends its body one byte at a time.

    Returns:
        Tuple of (raised exception or None, seconds spent in search)
    """
    body = b'{"sources":[]}'
    stop = asyncio.Event()

    async def handle(reader, writer):
        await reader.readuntil(b"\r\n\r\n")
        writer.write(
            b"HTTP/1.1 200 OK\r\nContent-Type: application/json\r\n"
            b"Content-Length: %d\r\n\r\n" % len(body)
        )
        try:
            await writer.drain()
            for byte in body:
                await asyncio.sleep(byte_interval)
                if stop.is_set():
                    break
                writer.write(bytes([byte]))
                await writer.drain()
        except ConnectionError:
            pass
        finally:
            writer.close()

    server = await asyncio.start_server(handle, "127.0.0.1", 0)
    port = server.sockets[0].getsockname()[1]
    client = ConferenceSearchClient(
        f"http://127.0.0.1:{port}/query", timeout_seconds=timeout_seconds
    )

    error = None
    async with server:
        start = time.monotonic()
        try:
            await client.search("AI")
        except TransportError as e:
            error = e
        elapsed = time.monotonic() - start
        stop.set()
    return error, elapsed


class TestSearchDeadline:
    """Tests for the overall request deadline."""

    def test_slow_body_hits_overall_timeout(self):
        """Each byte arrives well within the timeout, the whole body does not."""
        error, elapsed = asyncio.run(_search_slow_server(timeout_seconds=0.5, byte_interval=0.2))

        assert error is not None
        assert "timed out after 0.5s" in str(error)
        assert elapsed < 1.5

"""Tests for the Upstash REST transport layer."""

from __future__ import annotations

import json

import httpx
import pytest
import respx

from kartstandings.exceptions import StorageAPIError, StorageConnectionError, StorageTimeoutError
from kartstandings.storage._http import UpstashTransport
from tests.conftest import UPSTASH_TOKEN, UPSTASH_URL


@pytest.fixture
def transport():
    transport = UpstashTransport(UPSTASH_URL, UPSTASH_TOKEN)
    yield transport
    transport.close()


class TestCommand:
    @respx.mock
    def test_success(self, transport) -> None:
        route = respx.post(UPSTASH_URL).mock(return_value=httpx.Response(200, json={"result": "PONG"}))
        assert transport.command("PING") == "PONG"
        assert json.loads(route.calls.last.request.content) == ["PING"]

    @respx.mock
    def test_bearer_token(self, transport) -> None:
        route = respx.post(UPSTASH_URL).mock(return_value=httpx.Response(200, json={"result": None}))
        transport.command("GET", "missing")
        assert route.calls.last.request.headers["Authorization"] == f"Bearer {UPSTASH_TOKEN}"

    @respx.mock
    def test_trailing_slash_in_url(self) -> None:
        respx.post(UPSTASH_URL).mock(return_value=httpx.Response(200, json={"result": 1}))
        transport = UpstashTransport(f"{UPSTASH_URL}/", UPSTASH_TOKEN)
        assert transport.command("EXISTS", "k") == 1
        transport.close()

    @respx.mock
    def test_error_response(self, transport) -> None:
        respx.post(UPSTASH_URL).mock(
            return_value=httpx.Response(400, json={"error": "ERR wrong number of arguments"})
        )
        with pytest.raises(StorageAPIError) as exc_info:
            transport.command("SET", "k")
        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "ERR wrong number of arguments"

    @respx.mock
    def test_unauthorized_plain_text(self, transport) -> None:
        respx.post(UPSTASH_URL).mock(return_value=httpx.Response(401, text="Unauthorized"))
        with pytest.raises(StorageAPIError) as exc_info:
            transport.command("PING")
        assert exc_info.value.status_code == 401
        assert str(exc_info.value) == "HTTP 401: Unauthorized"

    @respx.mock
    def test_unexpected_reply(self, transport) -> None:
        respx.post(UPSTASH_URL).mock(return_value=httpx.Response(200, json=["odd"]))
        with pytest.raises(StorageAPIError):
            transport.command("PING")

    @respx.mock
    def test_connection_error(self, transport) -> None:
        respx.post(UPSTASH_URL).mock(side_effect=httpx.ConnectError("fail"))
        with pytest.raises(StorageConnectionError):
            transport.command("PING")

    @respx.mock
    def test_timeout(self, transport) -> None:
        respx.post(UPSTASH_URL).mock(side_effect=httpx.ReadTimeout("slow"))
        with pytest.raises(StorageTimeoutError):
            transport.command("PING")


class TestTransaction:
    @respx.mock
    def test_success(self, transport) -> None:
        route = respx.post(f"{UPSTASH_URL}/multi-exec").mock(
            return_value=httpx.Response(200, json=[{"result": "OK"}, {"result": "OK"}])
        )
        results = transport.transaction([["SET", "a", "1"], ["SET", "b", "2"]])
        assert results == ["OK", "OK"]
        assert json.loads(route.calls.last.request.content) == [["SET", "a", "1"], ["SET", "b", "2"]]

    @respx.mock
    def test_command_error(self, transport) -> None:
        respx.post(f"{UPSTASH_URL}/multi-exec").mock(
            return_value=httpx.Response(200, json=[{"result": "OK"}, {"error": "WRONGTYPE"}])
        )
        with pytest.raises(StorageAPIError, match="WRONGTYPE"):
            transport.transaction([["SET", "a", "1"], ["INCR", "a"]])

    @respx.mock
    def test_transaction_rejected(self, transport) -> None:
        respx.post(f"{UPSTASH_URL}/multi-exec").mock(
            return_value=httpx.Response(400, json={"error": "ERR transactions are disabled"})
        )
        with pytest.raises(StorageAPIError) as exc_info:
            transport.transaction([["SET", "a", "1"]])
        assert exc_info.value.status_code == 400

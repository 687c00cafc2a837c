"""Tests for the Upstash-backed key-value store."""

from __future__ import annotations

import json

import httpx
import pytest
import respx

from kartstandings.exceptions import StorageConnectionError
from kartstandings.storage.upstash import UpstashStore
from tests.conftest import UPSTASH_TOKEN, UPSTASH_URL


@pytest.fixture
def store():
    with UpstashStore(UPSTASH_URL, UPSTASH_TOKEN) as store:
        yield store


def _sent(route: respx.Route) -> list:
    return json.loads(route.calls.last.request.content)


class TestUpstashStore:
    @respx.mock
    def test_get_decodes_json(self, store) -> None:
        respx.post(UPSTASH_URL).mock(
            return_value=httpx.Response(200, json={"result": '{"id": "championship-2025"}'})
        )
        assert store.get("kart:championship:main") == {"id": "championship-2025"}

    @respx.mock
    def test_get_missing(self, store) -> None:
        respx.post(UPSTASH_URL).mock(return_value=httpx.Response(200, json={"result": None}))
        assert store.get("kart:championship:main") is None

    @respx.mock
    def test_get_plain_string(self, store) -> None:
        respx.post(UPSTASH_URL).mock(return_value=httpx.Response(200, json={"result": "not json"}))
        assert store.get("k") == "not json"

    @respx.mock
    def test_set_encodes_json(self, store) -> None:
        route = respx.post(UPSTASH_URL).mock(return_value=httpx.Response(200, json={"result": "OK"}))
        store.set("k", {"a": [1, 2]})
        assert _sent(route) == ["SET", "k", '{"a":[1,2]}']

    @respx.mock
    def test_set_with_expiry(self, store) -> None:
        route = respx.post(UPSTASH_URL).mock(return_value=httpx.Response(200, json={"result": "OK"}))
        store.set("k", 1, ex=300)
        assert _sent(route) == ["SET", "k", "1", "EX", "300"]

    @respx.mock
    def test_set_many_is_one_transaction(self, store) -> None:
        route = respx.post(f"{UPSTASH_URL}/multi-exec").mock(
            return_value=httpx.Response(200, json=[{"result": "OK"}, {"result": "OK"}])
        )
        store.set_many({"a": 1, "b": {"x": True}})
        assert route.call_count == 1
        assert _sent(route) == [["SET", "a", "1"], ["SET", "b", '{"x":true}']]

    @respx.mock
    def test_delete_exists_ping(self, store) -> None:
        respx.post(UPSTASH_URL).mock(
            side_effect=[
                httpx.Response(200, json={"result": 1}),
                httpx.Response(200, json={"result": 0}),
                httpx.Response(200, json={"result": "PONG"}),
            ]
        )
        assert store.delete("k") == 1
        assert store.exists("k") is False
        assert store.ping() == "PONG"

    @respx.mock
    def test_errors_propagate(self, store) -> None:
        respx.post(UPSTASH_URL).mock(side_effect=httpx.ConnectError("down"))
        with pytest.raises(StorageConnectionError):
            store.get("k")

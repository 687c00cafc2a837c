"""Low-level Upstash Redis REST transport wrapping httpx."""

from __future__ import annotations

from typing import Any

import httpx

from kartstandings.config import DEFAULT_TIMEOUT
from kartstandings.exceptions import (
    StorageAPIError,
    StorageConnectionError,
    StorageTimeoutError,
)


def _unwrap(payload: Any, status_code: int) -> Any:
    """Return the ``result`` of one command reply, raising on ``error``."""
    if isinstance(payload, dict) and "error" in payload:
        raise StorageAPIError(status_code=status_code, message=str(payload["error"]))
    if not isinstance(payload, dict) or "result" not in payload:
        raise StorageAPIError(status_code=status_code, message=f"Unexpected reply: {payload!r}")
    return payload["result"]


def _handle_response(response: httpx.Response) -> Any:
    """Validate response status and return parsed JSON."""
    if response.status_code >= 400:
        try:
            payload = response.json()
        except ValueError:
            payload = None
        message = payload["error"] if isinstance(payload, dict) and "error" in payload else response.text
        raise StorageAPIError(status_code=response.status_code, message=message)
    return response.json()


class UpstashTransport:
    """Synchronous Upstash REST transport using httpx.Client.

    Commands are sent as a JSON array (``["SET", "key", "value"]``) to the
    database URL; transactions go to ``/multi-exec``.
    """

    def __init__(
        self,
        url: str,
        token: str,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._url = url.rstrip("/")
        self._client = httpx.Client(
            timeout=timeout,
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/json",
            },
        )

    def _post(self, url: str, body: list[Any]) -> tuple[int, Any]:
        try:
            response = self._client.post(url, json=body)
        except httpx.ConnectError as exc:
            raise StorageConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise StorageTimeoutError(str(exc)) from exc
        return response.status_code, _handle_response(response)

    def command(self, *args: str) -> Any:
        """Run a single command and return its result."""
        status_code, payload = self._post(self._url, list(args))
        return _unwrap(payload, status_code)

    def transaction(self, commands: list[list[str]]) -> list[Any]:
        """Run *commands* atomically and return their results in order."""
        status_code, payload = self._post(f"{self._url}/multi-exec", commands)
        if not isinstance(payload, list):
            return [_unwrap(payload, status_code)]
        return [_unwrap(item, status_code) for item in payload]

    def close(self) -> None:
        self._client.close()

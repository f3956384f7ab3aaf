"""SDK Client - sends UI events to a running WebUI server over HTTP."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import httpx

from ..protocol.responses import UIResponse


@dataclass
class WebUIClient:
    """HTTP client for the /api/event endpoint.

    Usage:
        async with WebUIClient("http://127.0.0.1:3030") as client:
            response = await client.send_event("count-btn", "click")
    """

    base_url: str
    timeout: float = 10.0
    _http_client: httpx.AsyncClient | None = field(default=None, repr=False)

    async def __aenter__(self) -> WebUIClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    def _client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout)
        return self._http_client

    async def send_event(
        self,
        element_id: str,
        event_type: str,
        data: Any = None,
    ) -> UIResponse:
        """Send one event and return the server's result.

        A 4xx response that carries a result body (an event the server
        could not decode) is returned as a failed UIResponse.

        Raises:
            httpx.HTTPStatusError: For any other error status
        """
        body = {"element_id": element_id, "event_type": event_type, "data": data}
        response = await self._client().post("/api/event", json=body)

        if response.is_client_error:
            try:
                return UIResponse.model_validate(response.json())
            except ValueError:
                pass
        response.raise_for_status()
        return UIResponse.model_validate(response.json())

    async def health(self) -> dict[str, Any]:
        """Fetch the server's health status."""
        response = await self._client().get("/health")
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

"""Outbound result definitions.

A UIResponse is the outcome of processing one UIEvent. Fields that are
None are left out of the wire form entirely, so a request/response result
never carries a correlation_token key.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel


class UIResponse(BaseModel):
    """Result sent back to the frontend after handling an event.

    Example:
        {
            "succeeded": true,
            "message": "Data saved successfully",
            "payload": {"id": 42},
            "correlation_token": 123
        }
    """

    succeeded: bool
    message: str | None = None
    payload: Any = None
    correlation_token: int | None = None

    @classmethod
    def ok(cls, message: str | None = None, payload: Any = None) -> UIResponse:
        """Successful result."""
        return cls(succeeded=True, message=message, payload=payload)

    @classmethod
    def failure(cls, message: str, correlation_token: int | None = None) -> UIResponse:
        """Failed result carrying a human-readable reason."""
        return cls(succeeded=False, message=message, correlation_token=correlation_token)

    def with_token(self, correlation_token: int | None) -> UIResponse:
        """Copy of this result with its correlation token replaced."""
        return self.model_copy(update={"correlation_token": correlation_token})

    def to_dict(self) -> dict[str, Any]:
        """Wire form with absent fields omitted."""
        data: dict[str, Any] = {"succeeded": self.succeeded}
        if self.message is not None:
            data["message"] = self.message
        if self.payload is not None:
            data["payload"] = self.payload
        if self.correlation_token is not None:
            data["correlation_token"] = self.correlation_token
        return data

    def to_json(self) -> str:
        """Serialize to JSON.

        Raises:
            TypeError: If the payload holds a value JSON cannot represent
            ValueError: If the payload holds NaN or infinity, or a cycle
        """
        return json.dumps(self.to_dict(), ensure_ascii=False, allow_nan=False)

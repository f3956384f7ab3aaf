"""Inbound event definitions.

A UIEvent is what the browser sends when the user interacts with an
element. It is identical on both transports; only the duplex channel
makes use of the correlation token.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

# Separates element id and event type inside a binding key
KEY_SEPARATOR = ":"

# Correlation tokens are unsigned 32-bit integers on the wire
MAX_CORRELATION_TOKEN = 2**32 - 1


def binding_key(element_id: str, event_type: str) -> str:
    """Build the registry key for an element/event-type pair.

    Raises:
        ValueError: If either part contains the key separator
    """
    for part in (element_id, event_type):
        if KEY_SEPARATOR in part:
            raise ValueError(f"{part!r} must not contain {KEY_SEPARATOR!r}")
    return f"{element_id}{KEY_SEPARATOR}{event_type}"


class UIEvent(BaseModel):
    """A user interaction reported by the frontend.

    Example:
        {
            "element_id": "submit-button",
            "event_type": "click",
            "data": {"value": "Submit"},
            "correlation_token": 123
        }

    The original browser client names the token `request_id`; both
    spellings are accepted on input.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    element_id: str
    event_type: str
    data: Any = None
    correlation_token: int | None = Field(
        default=None,
        ge=0,
        le=MAX_CORRELATION_TOKEN,
        validation_alias=AliasChoices("correlation_token", "request_id"),
    )

    @property
    def key(self) -> str:
        """Binding key used to look up the handler."""
        return f"{self.element_id}{KEY_SEPARATOR}{self.event_type}"

    @classmethod
    def from_json(cls, data: str | bytes) -> UIEvent:
        """Decode an event from its JSON wire form.

        Raises:
            pydantic.ValidationError: If the payload is not a valid event
        """
        return cls.model_validate_json(data)

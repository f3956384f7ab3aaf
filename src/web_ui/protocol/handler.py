"""Event dispatcher - transport-agnostic event handling.

Resolves an event's binding key in the registry, runs the handler and
shapes whatever it produced into a UIResponse. The WebSocket and HTTP
adapters both delegate here so the two transports behave identically,
apart from what each does with the correlation token afterwards.
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING

from ..errors import HandlerError
from .events import UIEvent
from .responses import UIResponse

if TYPE_CHECKING:
    from ..registry import HandlerRegistry

logger = logging.getLogger(__name__)


class EventDispatcher:
    """Routes UI events to their registered handlers.

    Usage:
        dispatcher = EventDispatcher(registry)
        response = await dispatcher.dispatch(event)

    Correlation:
        The returned response always carries the event's correlation_token.
        Whatever token a handler puts on its own response is discarded;
        clearing it for HTTP is the adapter's job.

    Handlers run after the registry's read hold has been released, so a
    handler may register further handlers. A handler must not itself take
    the registry lock (registry.lock) around a call that dispatches, since
    the lookup would then wait on the handler forever.
    """

    def __init__(self, registry: HandlerRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> HandlerRegistry:
        return self._registry

    async def dispatch(self, event: UIEvent) -> UIResponse:
        """Handle one event and return its result.

        Args:
            event: The decoded event

        Returns:
            Response correlated to the event
        """
        key = event.key
        token = event.correlation_token

        handler = await self._registry.lookup_key(key)
        if handler is None:
            logger.debug(f"No handler for {key}")
            return UIResponse.failure(f"no handler for {key}", correlation_token=token)

        logger.debug(f"Dispatching {key} (token={token})")

        try:
            outcome = handler(event)
            if inspect.isawaitable(outcome):
                outcome = await outcome
        except HandlerError as e:
            return UIResponse.failure(str(e), correlation_token=token)
        except Exception as e:
            logger.exception(f"Handler for {key} raised: {e}")
            return UIResponse.failure(str(e) or type(e).__name__, correlation_token=token)

        if isinstance(outcome, UIResponse):
            return self._encodable(key, outcome.with_token(token))
        if isinstance(outcome, str):
            return UIResponse.failure(outcome, correlation_token=token)

        logger.error(f"Handler for {key} returned {type(outcome).__name__}")
        return UIResponse.failure(
            f"handler for {key} returned {type(outcome).__name__}",
            correlation_token=token,
        )

    @staticmethod
    def _encodable(key: str, response: UIResponse) -> UIResponse:
        """Return the response if it encodes as strict JSON, else a failure."""
        try:
            response.to_json()
        except (TypeError, ValueError) as e:
            logger.error(f"Handler for {key} returned a payload that is not JSON: {e}")
            return UIResponse.failure(
                f"handler for {key} returned a payload that is not JSON: {e}",
                correlation_token=response.correlation_token,
            )
        return response

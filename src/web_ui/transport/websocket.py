"""WebSocket transport implementation.

Server side of the duplex channel: receives UIEvents as text frames and
sends UIResponses back on the same connection. Delivery is best effort in
both directions. Frames that do not decode are dropped, and a failed send
is ignored until the next receive notices the connection is gone.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator

from pydantic import ValidationError
from starlette.websockets import WebSocket, WebSocketDisconnect, WebSocketState

from ..protocol.events import UIEvent
from ..protocol.responses import UIResponse

logger = logging.getLogger(__name__)


class WebSocketServerTransport:
    """Server-side WebSocket transport.

    Handles a single WebSocket connection for bidirectional communication.
    """

    def __init__(self, websocket: WebSocket):
        self._websocket = websocket
        self._connected = False

    @property
    def is_connected(self) -> bool:
        """Check if the WebSocket is connected."""
        return self._connected and self._websocket.client_state == WebSocketState.CONNECTED

    async def connect(self) -> None:
        """Accept the WebSocket connection."""
        await self._websocket.accept()
        self._connected = True

    async def disconnect(self) -> None:
        """Close the WebSocket connection if it is still open."""
        self._connected = False
        if self._websocket.client_state == WebSocketState.CONNECTED:
            try:
                await self._websocket.close()
            except RuntimeError as e:
                logger.debug(f"WebSocket already closed: {e}")

    async def send_response(self, response: UIResponse) -> bool:
        """Send a response to the client.

        Returns:
            True if the frame was handed to the connection, False otherwise
        """
        if not self.is_connected:
            return False
        try:
            text = response.to_json()
        except (TypeError, ValueError) as e:
            logger.error(f"Cannot encode response (token={response.correlation_token}): {e}")
            return False
        try:
            await self._websocket.send_text(text)
            return True
        except (WebSocketDisconnect, RuntimeError, OSError) as e:
            logger.debug(f"Dropped response (token={response.correlation_token}): {e}")
            return False

    async def receive_events(self) -> AsyncIterator[UIEvent]:
        """Receive events from the client until the connection closes.

        Malformed frames are skipped without a reply.
        """
        try:
            while self.is_connected:
                message = await self._websocket.receive()
                if message["type"] == "websocket.disconnect":
                    break

                text = self._frame_text(message)
                if text is None:
                    continue

                try:
                    event = UIEvent.from_json(text)
                except ValidationError as e:
                    logger.debug(f"Dropped malformed frame: {e.error_count()} error(s)")
                    continue

                yield event

        except WebSocketDisconnect:
            pass
        except Exception as e:
            logger.exception(f"WebSocket receive error: {e}")
        finally:
            self._connected = False

    @staticmethod
    def _frame_text(message: dict) -> str | None:
        """Text content of a frame; binary frames must be valid UTF-8."""
        text = message.get("text")
        if text is not None:
            return text

        data = message.get("bytes")
        if data is None:
            return None
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError:
            logger.debug("Dropped binary frame that is not UTF-8")
            return None

"""WebSocket endpoint for the duplex event channel.

Each connection runs one receive -> dispatch -> respond loop. Events from
the same connection are handled strictly in order; separate connections
run independently and share only the handler registry.
"""

from __future__ import annotations

import logging

from starlette.routing import WebSocketRoute
from starlette.websockets import WebSocket

from ..protocol.handler import EventDispatcher
from ..transport.websocket import WebSocketServerTransport

logger = logging.getLogger(__name__)


class DuplexEventSession:
    """Drives one WebSocket connection.

    Lifecycle:
    - Accepts the connection
    - Dispatches every decodable event and sends back its response,
      echoing the event's correlation_token
    - Ends when the client disconnects or the transport fails
    """

    def __init__(self, websocket: WebSocket, dispatcher: EventDispatcher):
        self.websocket = websocket
        self.dispatcher = dispatcher
        self.transport = WebSocketServerTransport(websocket)
        self.handled = 0

    async def handle(self) -> None:
        """Main handler for the WebSocket connection."""
        client = self.websocket.client
        await self.transport.connect()
        logger.info(f"WebSocket connected: {client}")

        try:
            async for event in self.transport.receive_events():
                response = await self.dispatcher.dispatch(event)
                await self.transport.send_response(response)
                self.handled += 1
        finally:
            await self.transport.disconnect()
            logger.info(f"WebSocket disconnected: {client} ({self.handled} event(s) handled)")


async def websocket_event_endpoint(websocket: WebSocket) -> None:
    """WebSocket endpoint for UI events.

    URL: /ws

    Protocol:
    1. Client connects
    2. Client sends UIEvent JSON text frames
    3. Server answers each event with one UIResponse frame carrying the
       same correlation_token; malformed frames get no answer
    """
    session = DuplexEventSession(websocket, websocket.app.state.dispatcher)
    await session.handle()


# Route definitions
websocket_routes = [
    WebSocketRoute("/ws", websocket_event_endpoint),
]

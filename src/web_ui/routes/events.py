"""HTTP endpoint for the request/response event channel.

One POST carries one event and gets one result. Unlike the WebSocket
channel, a body that does not decode is answered with a failure result
and a 4xx status instead of being dropped.
"""

import json
import logging

from pydantic import ValidationError
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from ..protocol.events import UIEvent
from ..protocol.responses import UIResponse

logger = logging.getLogger(__name__)


def _invalid_event(detail: str, status_code: int) -> JSONResponse:
    logger.debug(f"Rejected HTTP event: {detail}")
    response = UIResponse.failure(f"invalid event: {detail}")
    return JSONResponse(response.to_dict(), status_code=status_code)


async def post_event(request: Request) -> JSONResponse:
    """Handle one UI event.

    The response never carries a correlation_token, even when the event
    did; HTTP already pairs the request with its response.
    """
    try:
        body = json.loads(await request.body())
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        return _invalid_event(str(e), 400)

    try:
        event = UIEvent.model_validate(body)
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc']) or 'body'}: {err['msg']}"
            for err in e.errors()
        )
        return _invalid_event(errors, 422)

    response = await request.app.state.dispatcher.dispatch(event)
    return JSONResponse(response.with_token(None).to_dict())


event_routes = [
    Route("/api/event", post_event, methods=["POST"]),
]

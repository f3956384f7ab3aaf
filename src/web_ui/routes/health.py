"""Health check endpoint."""

from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route


async def health_check(request: Request) -> JSONResponse:
    """Health check endpoint."""
    state = request.app.state
    return JSONResponse(
        {
            "status": "ok",
            "title": state.config.title,
            "handlers": state.registry.count,
        }
    )


health_routes = [
    Route("/health", health_check, methods=["GET"]),
]

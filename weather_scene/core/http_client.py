"""Shared HTTP client construction."""

import httpx

from weather_scene.config import Settings, get_settings
from weather_scene.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


async def log_request(request: httpx.Request) -> None:
    """Event hook to log outgoing requests."""
    log_with_context(
        logger,
        "info",
        "HTTP Request",
        method=request.method,
        url=str(request.url),
        event_type="http_request",
    )


async def log_response(response: httpx.Response) -> None:
    """Event hook to log responses."""
    log_with_context(
        logger,
        "info",
        "HTTP Response",
        status_code=response.status_code,
        url=str(response.request.url),
        event_type="http_response",
    )


def create_http_client(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create the HTTP client used for weather requests.

    The caller owns the client and must close it (``async with`` or ``aclose``).

    Args:
        settings: Settings instance (defaults to singleton)
        transport: Optional transport override (tests use httpx.MockTransport)

    Returns:
        Configured AsyncClient
    """
    if settings is None:
        settings = get_settings()

    log_with_context(
        logger,
        "debug",
        "Creating HTTP client",
        connect_timeout=settings.http_connect_timeout,
        read_timeout=settings.http_read_timeout,
        event_type="http_client_config",
    )

    return httpx.AsyncClient(
        timeout=httpx.Timeout(
            connect=settings.http_connect_timeout,
            read=settings.http_read_timeout,
            write=5.0,
            pool=5.0,
        ),
        limits=httpx.Limits(
            max_keepalive_connections=5,
            max_connections=10,
            keepalive_expiry=30.0,
        ),
        follow_redirects=True,
        transport=transport,
        event_hooks={"request": [log_request], "response": [log_response]},
    )

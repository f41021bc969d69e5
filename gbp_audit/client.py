"""Audit server client: one GET per audit, no retries."""

import logging

import httpx

from .config import Settings, load_settings
from .errors import ConnectivityError, ServerError
from .models import ProfileMetrics

logger = logging.getLogger(__name__)


async def fetch_profile_metrics(
    link: str,
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ProfileMetrics:
    """
    Request metrics for a share link from the audit server.

    Args:
        link: GBP share link, sent as the ``url`` query parameter
        settings: Endpoint and timeout (default: from the environment)
        transport: Optional httpx transport, used by tests to stub the server

    Returns:
        ProfileMetrics parsed from the JSON body

    Raises:
        ServerError: non-2xx status or a body that is not a metrics object
        ConnectivityError: the request never completed
    """
    settings = settings or load_settings()

    logger.info("Requesting metrics from %s for %s", settings.endpoint, link)
    try:
        async with httpx.AsyncClient(timeout=settings.timeout, transport=transport) as client:
            response = await client.get(settings.endpoint, params={"url": link})
    except httpx.TransportError as e:
        logger.error("Audit server unreachable at %s: %r", settings.endpoint, e)
        raise ConnectivityError(f"Request to {settings.endpoint} failed: {e!r}") from e

    if not response.is_success:
        logger.warning("Audit server responded with HTTP %d", response.status_code)
        raise ServerError(
            f"Server responded with an error (HTTP {response.status_code}).",
            status_code=response.status_code,
        )

    try:
        data = response.json()
    except ValueError as e:
        logger.warning("Audit server returned a non-JSON body")
        raise ServerError("Server returned a body that is not JSON.", response.status_code) from e

    if not isinstance(data, dict):
        logger.warning("Audit server returned %s instead of an object", type(data).__name__)
        raise ServerError("Server returned JSON that is not an object.", response.status_code)

    try:
        return ProfileMetrics.from_dict(data)
    except (TypeError, ValueError, OverflowError) as e:
        logger.warning("Audit server returned malformed metrics: %s", e)
        raise ServerError(f"Malformed metrics: {e}", response.status_code) from e

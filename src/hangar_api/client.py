"""Send requests through a caller-supplied httpx client and decode the reply.

No transport policy lives here: no retries, no auth, no status-code handling.
Transport exceptions from httpx propagate unchanged. Callers who want HTTP
errors raised should install an ``event_hooks`` response hook that calls
``raise_for_status()`` on their client.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from hangar_api.models import BASE_API_URL
from hangar_api.requests import HangarRequest

logger = logging.getLogger(__name__)


async def fetch(client: httpx.AsyncClient, request: HangarRequest, *, base_url: str = BASE_API_URL) -> Any:
    """Send ``request`` with an async client and decode the response body.

    Raises:
        DecodeError: If the body does not match the request's response type.
        httpx.HTTPError: Anything the client itself raises.
    """
    http_request = request.build(client, base_url=base_url)
    logger.debug("GET %s", http_request.url)
    response = await client.send(http_request)
    logger.debug("GET %s -> %s (%d bytes)", http_request.url, response.status_code, len(response.content))
    return request.decode(response.content)


def fetch_sync(client: httpx.Client, request: HangarRequest, *, base_url: str = BASE_API_URL) -> Any:
    """Blocking counterpart of ``fetch``."""
    http_request = request.build(client, base_url=base_url)
    logger.debug("GET %s", http_request.url)
    response = client.send(http_request)
    logger.debug("GET %s -> %s (%d bytes)", http_request.url, response.status_code, len(response.content))
    return request.decode(response.content)

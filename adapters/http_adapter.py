"""Shared outbound HTTP client used by the TheMealDB and Wikimedia adapters.
"""

from typing import Any, Mapping, Optional
import logging
import httpx

from app.config import settings
from app.exceptions import NetworkError

logger = logging.getLogger("mealmuse.http")

_client: Optional[httpx.AsyncClient] = None


# ------------------ Connection ------------------
def _build_client(transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=settings.http_timeout_sec,
        headers={"User-Agent": settings.user_agent},
        follow_redirects=True,
        transport=transport,
    )


def get_client() -> httpx.AsyncClient:
    """Lazy init the shared client."""
    global _client
    if _client is None or _client.is_closed:
        _client = _build_client()
    return _client


def connect(transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    """Open the shared client, optionally over a custom transport."""
    global _client
    _client = _build_client(transport)
    logger.info("HTTP client ready (timeout=%ss)", settings.http_timeout_sec)
    return _client


async def close():
    """Close the shared client."""
    global _client
    try:
        if _client is not None and not _client.is_closed:
            await _client.aclose()
            logger.info("HTTP client closed")
    finally:
        _client = None


# ------------------ Requests ------------------
async def get_json(
    client: httpx.AsyncClient,
    url: str,
    params: Optional[Mapping[str, Any]] = None,
) -> Any:
    """GET a URL and decode its JSON body.

    Raises:
        NetworkError: transport failure, non-2xx status, or a body that is
            not JSON
    """
    try:
        response = await client.get(url, params=params)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise NetworkError(
            f"HTTP error! status: {exc.response.status_code}",
            details={"url": url, "status": exc.response.status_code},
            code="HTTP_STATUS",
        ) from exc
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise NetworkError(
            f"Request failed: {exc}", details={"url": url}, code="TRANSPORT"
        ) from exc

    logger.debug("GET %s -> %s", response.url, response.status_code)
    try:
        return response.json()
    except ValueError as exc:
        raise NetworkError(
            "Response was not valid JSON", details={"url": url}, code="INVALID_PAYLOAD"
        ) from exc


async def probe(client: httpx.AsyncClient, url: str) -> bool:
    """Check that a URL answers a HEAD request with a 2xx status."""
    try:
        response = await client.head(url, timeout=settings.image_probe_timeout_sec)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.debug("HEAD %s failed: %s", url, exc)
        return False
    logger.debug("HEAD %s -> %s", url, response.status_code)
    return response.is_success

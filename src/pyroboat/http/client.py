"""HTTP transport utilities using httpx directly (async-only).

This module provides helper functions for creating async httpx clients from
Config objects and for sending a single request. No custom wrappers - the
transport is a plain ``httpx.AsyncClient``, so tests can swap in an
``httpx.MockTransport``.

Request-level failures (network, redirect loops, undecodable bodies) are
converted to TransportFailure here and are never retried at this layer.
"""

import logging
from typing import Dict, List, Optional, Tuple

import httpx

from pyroboat.config import Config
from pyroboat.errors import TransportFailure

logger = logging.getLogger(__name__)


def create_client(
    config: Config,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """Create an async httpx client from configuration.

    Args:
        config: Configuration object
        transport: Optional transport override (e.g. httpx.MockTransport)

    Returns:
        Configured httpx.AsyncClient instance

    Example:
        >>> config = Config()
        >>> async with create_client(config) as client:
        ...     response = await client.get(url)
    """
    kwargs = {}
    if transport is not None:
        kwargs['transport'] = transport
    else:
        # proxy/http2/verify only apply to the default transport
        kwargs['proxy'] = config.proxy
        kwargs['http2'] = config.http2
        kwargs['verify'] = config.verify_ssl

    return httpx.AsyncClient(
        headers={'User-Agent': config.user_agent},
        timeout=config.timeout,
        **kwargs,
    )


async def send_request(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    headers: Optional[Dict[str, str]] = None,
    params: Optional[List[Tuple[str, str]]] = None,
    content: Optional[bytes] = None,
    follow_redirects: bool = False,
) -> httpx.Response:
    """Send one request and return the response, whatever its status.

    Args:
        client: httpx.AsyncClient instance
        method: HTTP method
        url: Request URL
        headers: Request headers
        params: Query parameters as (name, value) pairs, order preserved
        content: Raw request body, sent as-is
        follow_redirects: Whether to follow redirects

    Returns:
        The httpx.Response with its body already read

    Raises:
        TransportFailure: If no usable response was received
    """
    logger.debug(f"{method} {url}")
    try:
        return await client.request(
            method,
            url,
            headers=headers,
            params=params,
            content=content,
            follow_redirects=follow_redirects,
        )
    except httpx.RequestError as e:
        logger.debug(f"{method} {url} failed: {e!r}")
        raise TransportFailure(e) from e

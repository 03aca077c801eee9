# app/providers/transport.py — shared HTTP client for the upstream providers
from __future__ import annotations

from typing import Any, Dict, Optional
import logging
import os
import time

import httpx

from app.utils.errors import InternalError, NotFound, UpstreamError

logger = logging.getLogger("country-info")

# -------------------------------------------------------------------
# CONFIG
# -------------------------------------------------------------------
UPSTREAM_TIMEOUT = float(os.getenv("UPSTREAM_TIMEOUT", "10.0"))

_HEADERS = {
    "Accept": "application/json",
    "User-Agent": "country-info/1.0",
}


# -------------------------------------------------------------------
# HTTP CLIENT (shared)
# -------------------------------------------------------------------
def _timeout() -> httpx.Timeout:
    return httpx.Timeout(
        timeout=UPSTREAM_TIMEOUT,
        connect=min(3.0, UPSTREAM_TIMEOUT),
        read=UPSTREAM_TIMEOUT,
        write=min(3.0, UPSTREAM_TIMEOUT),
        pool=min(3.0, UPSTREAM_TIMEOUT),
    )


_CLIENT: Optional[httpx.Client] = None


def get_client() -> httpx.Client:
    global _CLIENT
    if _CLIENT is not None:
        return _CLIENT

    limits = httpx.Limits(
        max_connections=int(os.getenv("UPSTREAM_MAX_CONNECTIONS", "20")),
        max_keepalive_connections=int(os.getenv("UPSTREAM_MAX_KEEPALIVE", "10")),
        keepalive_expiry=float(os.getenv("UPSTREAM_KEEPALIVE_EXPIRY", "30")),
    )

    _CLIENT = httpx.Client(
        timeout=_timeout(),
        headers=_HEADERS,
        follow_redirects=True,
        limits=limits,
    )
    return _CLIENT


def set_client(client: Optional[httpx.Client]) -> None:
    """Swap the shared client (tests install one backed by httpx.MockTransport)."""
    global _CLIENT
    _CLIENT = client


def close_client() -> None:
    global _CLIENT
    if _CLIENT is not None:
        _CLIENT.close()
        _CLIENT = None


# -------------------------------------------------------------------
# JSON request
# -------------------------------------------------------------------
def request_json(
    method: str,
    url: str,
    *,
    source: str,
    payload: Optional[Dict[str, Any]] = None,
    not_found_on_404: bool = False,
) -> Any:
    """
    Single-attempt request returning the decoded JSON body.

    Transport failures and non-200 answers raise UpstreamError, a 404 raises
    NotFound when the caller asks for it, and an undecodable body raises
    InternalError. Every failure is logged with the URL and status.
    """
    client = get_client()
    started = time.monotonic()
    try:
        resp = client.request(method, url, json=payload)
    except httpx.TimeoutException as e:
        logger.error("%s %s %s timed out: %r", source, method, url, e)
        raise UpstreamError(f"{source} request timed out: {url}") from e
    except httpx.HTTPError as e:
        logger.error("%s %s %s failed: %r", source, method, url, e)
        raise UpstreamError(f"{source} request failed: {url}: {e}") from e

    elapsed = time.monotonic() - started
    if resp.status_code == 404 and not_found_on_404:
        logger.warning("%s %s %s -> 404 (%.2fs)", source, method, url, elapsed)
        raise NotFound(f"{source} has no record at {url}")
    if resp.status_code != 200:
        logger.error(
            "%s %s %s returned status %d (%.2fs): %s",
            source, method, url, resp.status_code, elapsed, resp.text[:200],
        )
        raise UpstreamError(f"{source} returned status {resp.status_code}")

    try:
        data = resp.json()
    except ValueError as e:
        logger.error("%s %s %s: undecodable body: %r", source, method, url, e)
        raise InternalError(f"failed to decode {source} response: {e}") from e

    logger.info("%s %s %s -> 200 (%.2fs)", source, method, url, elapsed)
    return data

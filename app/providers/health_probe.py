# app/providers/health_probe.py
from __future__ import annotations

import logging
import os

import httpx

from app.providers.transport import get_client

logger = logging.getLogger("country-info")

HEALTH_PROBE_TIMEOUT = float(os.getenv("HEALTH_PROBE_TIMEOUT", "3.0"))


def probe_health(url: str, timeout: float = HEALTH_PROBE_TIMEOUT) -> str:
    """
    GET `url` and summarise the outcome as a status string:
      "200"            -> upstream answered 200
      "ERROR <reason>" -> any other HTTP status
      "FAILED"         -> transport failure or timeout
    Never raises.
    """
    try:
        resp = get_client().get(url, timeout=timeout)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.warning("error checking API %s: %r", url, e)
        return "FAILED"

    if resp.status_code != 200:
        logger.warning("API %s returned status %d", url, resp.status_code)
        return f"ERROR {httpx.codes.get_reason_phrase(resp.status_code)}"
    return "200"

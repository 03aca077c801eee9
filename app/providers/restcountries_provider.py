# app/providers/restcountries_provider.py
from __future__ import annotations

"""
REST Countries provider (metadata by ISO2 code).

Public functions:

- fetch_country_metadata(iso2)         -> CountryMetadata
- resolve_country_display_name(iso2)   -> str   (name.common)

The upstream answers GET {base}/alpha/{code} with a list of loosely typed
country objects. Everything here reads that JSON field by field: a missing or
wrong-typed field falls back to its default instead of failing the request.
Only a missing common name is fatal (NotFound).
"""

from typing import Any, Dict, List, Mapping, Optional
import logging
import math
import os

from app.providers.transport import request_json
from app.schemas.country import CountryMetadata
from app.utils.errors import InternalError, NotFound

logger = logging.getLogger("country-info")

# ----------------------------
# Config
# ----------------------------
RESTCOUNTRIES_BASE = os.getenv("RESTCOUNTRIES_BASE", "http://129.241.150.113:8080/v3.1").rstrip("/")

_SOURCE = "rest-countries"


# ----------------------------
# Defensive accessors
# ----------------------------
def _get_str(node: Any, *path: str) -> Optional[str]:
    """Walk nested mappings along `path`; None unless the leaf is a string."""
    cur = node
    for key in path:
        if not isinstance(cur, Mapping):
            return None
        cur = cur.get(key)
    return cur if isinstance(cur, str) else None


def _get_str_list(node: Mapping[str, Any], key: str) -> List[str]:
    raw = node.get(key)
    if not isinstance(raw, list):
        return []
    return [item for item in raw if isinstance(item, str)]


def _get_str_map(node: Mapping[str, Any], key: str) -> Dict[str, str]:
    raw = node.get(key)
    if not isinstance(raw, Mapping):
        return {}
    return {str(k): v for k, v in raw.items() if isinstance(v, str)}


def _get_count(node: Mapping[str, Any], key: str) -> Optional[int]:
    raw = node.get(key)
    # bool is an int subclass; a flag is not a population
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        return None
    if not math.isfinite(raw) or raw < 0:
        return None
    return int(raw)


def _first_record(payload: Any, iso2: str) -> Mapping[str, Any]:
    # v3.1 answers with a list; some mirrors answer with the bare object
    if isinstance(payload, Mapping):
        payload = [payload]
    if not isinstance(payload, list):
        raise InternalError(f"unexpected {_SOURCE} payload type for {iso2}: {type(payload).__name__}")
    if not payload or not isinstance(payload[0], Mapping):
        logger.warning("no data found for country code: %s", iso2)
        raise NotFound(f"no data found for country code: {iso2}")
    return payload[0]


def _fetch_record(iso2: str) -> Mapping[str, Any]:
    url = f"{RESTCOUNTRIES_BASE}/alpha/{iso2}"
    payload = request_json("GET", url, source=_SOURCE, not_found_on_404=True)
    return _first_record(payload, iso2)


def _common_name(record: Mapping[str, Any], iso2: str) -> str:
    name = _get_str(record, "name", "common")
    if not name:
        logger.warning("invalid country name received for ISO2 code: %s", iso2)
        raise NotFound(f"country name not found for ISO2 code: {iso2}")
    return name


def _capital(record: Mapping[str, Any]) -> str:
    caps = record.get("capital")
    if isinstance(caps, list) and caps and isinstance(caps[0], str):
        return caps[0]
    return "N/A"


# ----------------------------
# Public API
# ----------------------------
def fetch_country_metadata(iso2: str) -> CountryMetadata:
    record = _fetch_record(iso2)
    return CountryMetadata(
        name=_common_name(record, iso2),
        region=_get_str(record, "region") or "Unknown",
        population=_get_count(record, "population") or 0,
        languages=_get_str_map(record, "languages"),
        borders=_get_str_list(record, "borders"),
        flag=_get_str(record, "flags", "svg") or "",
        capital=_capital(record),
    )


def resolve_country_display_name(iso2: str) -> str:
    return _common_name(_fetch_record(iso2), iso2)

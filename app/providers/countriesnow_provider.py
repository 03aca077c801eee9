# app/providers/countriesnow_provider.py
from __future__ import annotations

"""
CountriesNow provider (cities and population history, keyed by country name).

- fetch_cities(name, limit)          -> [str]               (first `limit`, upstream order)
- fetch_population_history(name)     -> [PopulationRecord]  (upstream order)

Both endpoints take POST {"country": name} and wrap the answer in
{"error": bool, "msg": str, "data": ...}. A raised error flag becomes
UpstreamError.
"""

from typing import Any, List, Mapping, Optional
import logging
import os

from app.providers.transport import request_json
from app.schemas.country import PopulationRecord
from app.utils.errors import NotFound, UpstreamError

logger = logging.getLogger("country-info")

COUNTRIESNOW_BASE = os.getenv("COUNTRIESNOW_BASE", "http://129.241.150.113:3500/api/v0.1").rstrip("/")

_SOURCE = "countries-now"


def _post(path: str, country: str) -> Mapping[str, Any]:
    url = f"{COUNTRIESNOW_BASE}{path}"
    body = request_json("POST", url, source=_SOURCE, payload={"country": country})
    if not isinstance(body, Mapping):
        raise UpstreamError(f"{_SOURCE} {path} answered with a non-object body")
    if body.get("error") is True:
        msg = body.get("msg") if isinstance(body.get("msg"), str) else ""
        logger.warning("%s %s reported an error for country %s: %s", _SOURCE, path, country, msg)
        raise UpstreamError(f"{_SOURCE} returned an error for {country}: {msg}")
    return body


def _as_int(v: Any) -> Optional[int]:
    if isinstance(v, bool):
        return None
    if isinstance(v, int):
        return v
    if isinstance(v, float) and v.is_integer():
        return int(v)
    return None


def fetch_cities(country_name: str, limit: int) -> List[str]:
    body = _post("/countries/cities", country_name)
    data = body.get("data")
    cities = [c for c in data if isinstance(c, str)] if isinstance(data, list) else []
    return cities[:limit]


def fetch_population_history(country_name: str) -> List[PopulationRecord]:
    body = _post("/countries/population", country_name)
    data = body.get("data")
    counts = data.get("populationCounts") if isinstance(data, Mapping) else None
    if not isinstance(counts, list):
        logger.warning("no population data found for country: %s", country_name)
        raise NotFound(f"no population data found for country: {country_name}")

    out: List[PopulationRecord] = []
    for entry in counts:
        if not isinstance(entry, Mapping):
            continue
        year, value = _as_int(entry.get("year")), _as_int(entry.get("value"))
        if year is None or value is None or value < 0:
            logger.warning("skipping malformed population entry for %s: %r", country_name, entry)
            continue
        out.append(PopulationRecord(year=year, value=value))
    return out

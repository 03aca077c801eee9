# app/services/country_service.py
from __future__ import annotations

from typing import List
import logging

from app.providers.countriesnow_provider import fetch_cities
from app.providers.restcountries_provider import fetch_country_metadata
from app.schemas.country import CountryInfo
from app.utils.errors import CountryInfoError, ValidationError
from app.utils.validators import DEFAULT_CITY_LIMIT

logger = logging.getLogger("country-info")

CITIES_UNAVAILABLE: List[str] = ["City data not available"]


def _cities_or_placeholder(country_name: str, limit: int) -> List[str]:
    try:
        return fetch_cities(country_name, limit)
    except CountryInfoError as e:
        logger.warning("error fetching cities for %s: %s", country_name, e)
        return list(CITIES_UNAVAILABLE)


def get_country_info(iso2: str, limit: int = DEFAULT_CITY_LIMIT) -> CountryInfo:
    """
    Country metadata from rest-countries merged with up to `limit` cities
    from countries-now.

    Metadata is mandatory: NotFound / UpstreamError from that fetch propagate.
    A failed city lookup degrades to a single placeholder entry.
    """
    if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
        raise ValidationError("invalid 'limit' parameter. Must be a positive integer.")

    meta = fetch_country_metadata(iso2)
    cities = _cities_or_placeholder(meta.name, limit)

    return CountryInfo(
        name=meta.name,
        continent=meta.region,
        population=meta.population,
        languages=meta.languages,
        borders=meta.borders,
        flag=meta.flag,
        capital=meta.capital,
        cities=cities,
    )

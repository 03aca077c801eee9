# app/routes/info.py — /countryinfo/v1/info/{code}
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query

from app.schemas.country import CountryInfo
from app.services.country_service import get_country_info
from app.utils.errors import ValidationError
from app.utils.validators import parse_city_limit, validate_country_code

router = APIRouter(prefix="/countryinfo/v1/info", tags=["country"])


@router.get("/", include_in_schema=False)
def missing_code():
    raise ValidationError("missing country code. Example: /countryinfo/v1/info/no")


@router.get("/{code}", response_model=CountryInfo, summary="Country information")
def country_info(
    code: str,
    limit: Optional[str] = Query(None, description="Maximum number of cities (default 10)"),
) -> CountryInfo:
    """
    Country details from rest-countries plus a list of major cities.

    Examples:
      - GET /countryinfo/v1/info/no
      - GET /countryinfo/v1/info/us?limit=5
    """
    iso2 = validate_country_code(code)
    return get_country_info(iso2, parse_city_limit(limit))

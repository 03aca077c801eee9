# app/routes/population.py — /countryinfo/v1/population/{code}
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query

from app.schemas.country import PopulationReport
from app.services.population_service import get_population_report
from app.utils.errors import ValidationError
from app.utils.validators import parse_year_range, validate_country_code

router = APIRouter(prefix="/countryinfo/v1/population", tags=["population"])


@router.get("/", include_in_schema=False)
def missing_code():
    raise ValidationError("Missing country code. Example: /countryinfo/v1/population/NO")


@router.get("/{code}", response_model=PopulationReport, summary="Population history")
def population(
    code: str,
    limit: Optional[str] = Query(None, description="Year range 'startYear-endYear', e.g. 2000-2020"),
) -> PopulationReport:
    """
    Population counts for a country with their mean, optionally limited to a
    year range.

    Examples:
      - GET /countryinfo/v1/population/NO
      - GET /countryinfo/v1/population/US?limit=2000-2010
    """
    iso2 = validate_country_code(code)
    start, end = parse_year_range(limit)
    return get_population_report(iso2, start, end)

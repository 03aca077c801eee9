# app/services/population_service.py
from __future__ import annotations

import logging

from app.providers.countriesnow_provider import fetch_population_history
from app.providers.restcountries_provider import resolve_country_display_name
from app.schemas.country import PopulationReport
from app.utils.errors import ValidationError
from app.utils.series_math import filter_window, integer_mean

logger = logging.getLogger("country-info")


def get_population_report(iso2: str, start_year: int = 0, end_year: int = 0) -> PopulationReport:
    """
    Population history for `iso2`, limited to [start_year, end_year].

    A bound of 0 leaves that side open. The display name is resolved first
    because countries-now indexes population by name, not by code.
    """
    if start_year and end_year and start_year > end_year:
        raise ValidationError(
            f"invalid year range: startYear ({start_year}) cannot be greater than endYear ({end_year})"
        )

    name = resolve_country_display_name(iso2)
    history = fetch_population_history(name)
    values = filter_window(history, start_year, end_year)

    logger.info(
        "population %s (%s) | window=%s-%s | %d of %d records",
        iso2, name, start_year or "*", end_year or "*", len(values), len(history),
    )
    return PopulationReport(mean=integer_mean([r.value for r in values]), values=values)

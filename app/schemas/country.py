# app/schemas/country.py — typed records returned by the gateways and the API
from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field


class CountryMetadata(BaseModel):
    """Normalized rest-countries record; every field is always present."""

    name: str
    region: str = "Unknown"
    population: int = Field(0, ge=0)
    languages: Dict[str, str] = Field(default_factory=dict)
    borders: List[str] = Field(default_factory=list)
    flag: str = ""
    capital: str = "N/A"


class CountryInfo(BaseModel):
    name: str
    continent: str
    population: int = Field(ge=0)
    languages: Dict[str, str]
    borders: List[str]
    flag: str
    capital: str
    cities: List[str]


class PopulationRecord(BaseModel):
    year: int
    value: int = Field(ge=0)


class PopulationReport(BaseModel):
    mean: int
    values: List[PopulationRecord]


class HealthStatus(BaseModel):
    countriesnowapi: str
    restcountriesapi: str
    version: str
    uptime: int = Field(ge=0)

from __future__ import annotations

from typing import Any, Callable, Dict, List, Tuple

import httpx
import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.providers import countriesnow_provider, restcountries_provider
from app.providers.transport import set_client

RC = restcountries_provider.RESTCOUNTRIES_BASE
CN = countriesnow_provider.COUNTRIESNOW_BASE

Handler = Callable[[httpx.Request], httpx.Response]


class UpstreamStub:
    """
    Routes (method, url) to canned responses and records every request.
    Anything not registered behaves like an unreachable host.
    """

    def __init__(self) -> None:
        self.routes: Dict[Tuple[str, str], Handler] = {}
        self.calls: List[httpx.Request] = []

    def add(self, method: str, url: str, json: Any = None, status: int = 200) -> None:
        self.routes[(method, url)] = lambda request: httpx.Response(status, json=json)

    def add_handler(self, method: str, url: str, handler: Handler) -> None:
        self.routes[(method, url)] = handler

    def calls_to(self, url: str) -> List[httpx.Request]:
        return [r for r in self.calls if str(r.url) == url]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        route = self.routes.get((request.method, str(request.url)))
        if route is None:
            raise httpx.ConnectError("Connection refused", request=request)
        return route(request)


@pytest.fixture()
def upstream():
    stub = UpstreamStub()
    client = httpx.Client(transport=httpx.MockTransport(stub))
    set_client(client)
    try:
        yield stub
    finally:
        set_client(None)
        client.close()


@pytest.fixture()
def client(upstream):
    return TestClient(app)


# -----------------------------------------------------------------------------
# Canned upstream payloads
# -----------------------------------------------------------------------------

NORWAY = {
    "name": {"common": "Norway", "official": "Kingdom of Norway"},
    "region": "Europe",
    "borders": ["FIN", "SWE", "RUS"],
    "languages": {"nno": "Norwegian Nynorsk", "nob": "Norwegian Bokmål", "smi": "Sami"},
    "flags": {"png": "https://flagcdn.com/w320/no.png", "svg": "https://flagcdn.com/no.svg"},
    "capital": ["Oslo"],
    "population": 5379475,
}

NORWAY_CITIES = [
    "Abelvaer", "Adalsbruk", "Adland", "Agotnes", "Agskardet",
    "Aker", "Akkarfjord", "Akrehamn", "Al", "Alen", "Algard", "Alta",
]

INDIA = {"name": {"common": "India"}, "region": "Asia", "population": 1380004385}

INDIA_COUNTS = [
    {"year": 2008, "value": 1197070109},
    {"year": 2009, "value": 1214182182},
    {"year": 2010, "value": 1230980691},
    {"year": 2011, "value": 1247446011},
    {"year": 2012, "value": 1263589639},
    {"year": 2013, "value": 1279498874},
    {"year": 2014, "value": 1295291543},
    {"year": 2015, "value": 1310152403},
    {"year": 2016, "value": 1324509589},
    {"year": 2017, "value": 1338658835},
    {"year": 2018, "value": 1352617328},
]


def population_body(country: str, counts: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {
        "error": False,
        "msg": "all population data retrieved",
        "data": {"country": country, "code": "IND", "iso3": "IND", "populationCounts": counts},
    }


@pytest.fixture()
def norway(upstream):
    upstream.add("GET", f"{RC}/alpha/NO", json=[NORWAY])
    upstream.add(
        "POST",
        f"{CN}/countries/cities",
        json={"error": False, "msg": "cities in Norway retrieved", "data": NORWAY_CITIES},
    )
    return upstream


@pytest.fixture()
def india(upstream):
    upstream.add("GET", f"{RC}/alpha/IN", json=[INDIA])
    upstream.add("POST", f"{CN}/countries/population", json=population_body("India", INDIA_COUNTS))
    return upstream

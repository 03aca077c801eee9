# app/services/status_service.py — upstream health + uptime
from __future__ import annotations

from dataclasses import dataclass, field
import concurrent.futures as _futures
import time as _time

from app.providers.countriesnow_provider import COUNTRIESNOW_BASE
from app.providers.health_probe import probe_health
from app.providers.restcountries_provider import RESTCOUNTRIES_BASE
from app.schemas.country import HealthStatus

SERVICE_VERSION = "v1"


@dataclass(frozen=True)
class ServiceClock:
    """Process start instant, captured once when the app is created."""

    started_at: float = field(default_factory=_time.monotonic)

    def uptime_seconds(self) -> int:
        return max(0, int(_time.monotonic() - self.started_at))


def countriesnow_health_url() -> str:
    return f"{COUNTRIESNOW_BASE}/countries"


def restcountries_health_url() -> str:
    return f"{RESTCOUNTRIES_BASE}/all"


def get_health_status(clock: ServiceClock) -> HealthStatus:
    # the probes are independent; run them side by side
    with _futures.ThreadPoolExecutor(max_workers=2) as ex:
        countriesnow = ex.submit(probe_health, countriesnow_health_url())
        restcountries = ex.submit(probe_health, restcountries_health_url())
        return HealthStatus(
            countriesnowapi=countriesnow.result(),
            restcountriesapi=restcountries.result(),
            version=SERVICE_VERSION,
            uptime=clock.uptime_seconds(),
        )

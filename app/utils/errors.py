# app/utils/errors.py — error taxonomy shared by gateways, services and routes
from __future__ import annotations

from typing import Optional


class CountryInfoError(Exception):
    """
    Base error for the service. Each subclass fixes the HTTP status the
    route layer answers with; `detail` is the terse client-facing message.
    """

    status_code: int = 500
    default_detail: str = "internal server error."

    def __init__(self, message: str, detail: Optional[str] = None) -> None:
        super().__init__(message)
        self.detail = detail or self.default_detail


class ValidationError(CountryInfoError):
    status_code = 400
    default_detail = "invalid request."

    def __init__(self, message: str, detail: Optional[str] = None) -> None:
        # validation messages are written for the client already
        super().__init__(message, detail or message)


class NotFound(CountryInfoError):
    status_code = 404
    default_detail = "country not found in the database."


class UpstreamError(CountryInfoError):
    status_code = 502
    default_detail = "failed to retrieve data from the external API."


class InternalError(CountryInfoError):
    status_code = 500
    default_detail = "internal server error while fetching data."

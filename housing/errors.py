"""Exception hierarchy for the housing data pipeline."""

from __future__ import annotations


class HousingDataError(Exception):
    """Base class for all pipeline failures."""


class ConfigurationError(HousingDataError):
    """Raised when a required setting (the FRED API key) is missing."""


class UpstreamError(HousingDataError):
    """FRED answered with a non-success HTTP status."""

    def __init__(self, series_id: str, status_code: int, reason: str) -> None:
        self.series_id = series_id
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"FRED API error: {status_code} {reason}".rstrip())


class TransportError(HousingDataError):
    """The request to FRED could not complete (timeout, DNS, reset)."""

    def __init__(self, series_id: str, detail: str) -> None:
        self.series_id = series_id
        self.detail = detail
        super().__init__(f"Network error fetching FRED series {series_id}: {detail}")


class AssemblyError(HousingDataError):
    """Unexpected failure while building the aggregate payload."""


__all__ = [
    "HousingDataError",
    "ConfigurationError",
    "UpstreamError",
    "TransportError",
    "AssemblyError",
]

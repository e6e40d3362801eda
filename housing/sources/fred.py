"""St. Louis Fed (FRED) series client."""

from __future__ import annotations

import calendar
import logging
from datetime import date
from typing import Any, Mapping

import httpx

from housing.common import fetch_json
from housing.config import DEFAULT_FRED_BASE_URL, DEFAULT_TIMEOUT_SECONDS, Settings
from housing.errors import ConfigurationError, TransportError, UpstreamError
from housing.model import Observation

FRED_BASE_URL = DEFAULT_FRED_BASE_URL

logger = logging.getLogger(__name__)


def _months_before(anchor: date, months: int) -> date:
    total = anchor.year * 12 + (anchor.month - 1) - months
    year, month = divmod(total, 12)
    month += 1
    day = min(anchor.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def _parse_observations(series_id: str, payload: Any) -> list[Observation]:
    observations = payload.get("observations") if isinstance(payload, Mapping) else None
    if not isinstance(observations, list):
        logger.warning("FRED response for %s has no observations list.", series_id)
        return []

    parsed: list[Observation] = []
    for obs in observations:
        if not isinstance(obs, Mapping) or not obs.get("date"):
            continue
        parsed.append(Observation(date=str(obs["date"]), value=obs.get("value")))
    return parsed


class FredClient:
    """Fetches raw observations for FRED series.

    The API key is injected at construction so callers (and tests) never
    depend on process-wide environment state.
    """

    def __init__(
        self,
        api_key: str | None,
        *,
        base_url: str = FRED_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        max_attempts: int = 1,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key.strip() if api_key else None
        self.base_url = base_url
        self.timeout = timeout
        self.max_attempts = max_attempts
        self._transport = transport

    @classmethod
    def from_settings(
        cls, settings: Settings, *, transport: httpx.AsyncBaseTransport | None = None
    ) -> "FredClient":
        return cls(
            settings.fred_api_key,
            base_url=settings.fred_base_url,
            timeout=settings.request_timeout,
            max_attempts=settings.max_attempts,
            transport=transport,
        )

    def build_params(
        self,
        series_id: str,
        *,
        lookback_months: int | None = None,
        today: date | None = None,
    ) -> dict[str, str]:
        if not self._api_key:
            raise ConfigurationError("FRED_API_KEY environment variable is not set")

        params = {
            "series_id": series_id,
            "api_key": self._api_key,
            "file_type": "json",
            "sort_order": "asc",
            "units": "lin",
        }
        if lookback_months:
            end = today or date.today()
            params["observation_start"] = _months_before(end, lookback_months).isoformat()
            params["observation_end"] = end.isoformat()
        return params

    async def fetch_series(
        self,
        series_id: str,
        *,
        lookback_months: int | None = None,
        today: date | None = None,
    ) -> list[Observation]:
        """Return the observations for ``series_id``, oldest first.

        Without ``lookback_months`` FRED returns the full available history.
        """

        params = self.build_params(series_id, lookback_months=lookback_months, today=today)

        try:
            payload = await fetch_json(
                self.base_url,
                headers={"Accept": "application/json"},
                params=params,
                timeout=self.timeout,
                attempts=self.max_attempts,
                transport=self._transport,
            )
        except httpx.HTTPStatusError as exc:
            response = exc.response
            logger.warning(
                "FRED request failed for %s status=%s.", series_id, response.status_code
            )
            raise UpstreamError(series_id, response.status_code, response.reason_phrase) from exc
        except httpx.TransportError as exc:
            logger.warning("FRED request for %s did not complete: %s", series_id, exc)
            raise TransportError(series_id, str(exc) or type(exc).__name__) from exc
        except ValueError as exc:
            logger.warning("FRED response for %s is not valid JSON.", series_id)
            raise UpstreamError(series_id, 200, "Invalid JSON body") from exc

        return _parse_observations(series_id, payload)


__all__ = ["FredClient", "FRED_BASE_URL"]

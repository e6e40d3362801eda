"""Fetch every tracked series concurrently and assemble the dashboard payload."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Iterable, Protocol, Sequence

from housing.errors import AssemblyError, ConfigurationError
from housing.metrics import empty_metric, summarize
from housing.model import HousingData, Observation
from housing.series import TRACKED_SERIES, TrackedSeries
from housing.transform import transform_observations

logger = logging.getLogger(__name__)


class SeriesFetcher(Protocol):
    async def fetch_series(
        self, series_id: str, *, lookback_months: int | None = None
    ) -> list[Observation]: ...


@dataclass(frozen=True)
class Settled:
    """Outcome of one branch of a settle-all join."""

    value: Any = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


async def settle_all(awaitables: Iterable[Awaitable[Any]]) -> list[Settled]:
    """Await every awaitable; a failing branch never cancels its siblings."""
    results = await asyncio.gather(*awaitables, return_exceptions=True)
    return [
        Settled(error=result) if isinstance(result, BaseException) else Settled(value=result)
        for result in results
    ]


def _observations_for(series: TrackedSeries, outcome: Settled) -> list[Observation]:
    if outcome.ok:
        return list(outcome.value or [])
    logger.warning(
        "Series %s (%s) unavailable, continuing without it: %s",
        series.key,
        series.series_id,
        outcome.error,
    )
    return []


def build_housing_data(observations: Sequence[Sequence[Observation]]) -> HousingData:
    """Assemble the payload from per-series observations, one list per tracked series in order."""
    metrics = []
    charts = {}
    for tracked, obs in zip(TRACKED_SERIES, observations, strict=True):
        metrics.append(summarize(obs, tracked))
        charts[tracked.chart_attr] = transform_observations(obs)
    return HousingData(metrics=metrics, **charts)


def _assemble(outcomes: Sequence[Settled]) -> HousingData:
    try:
        observations = [
            _observations_for(tracked, outcome)
            for tracked, outcome in zip(TRACKED_SERIES, outcomes, strict=True)
        ]
        return build_housing_data(observations)
    except Exception as exc:
        raise AssemblyError(f"Failed to assemble housing data: {exc}") from exc


def fallback_housing_data() -> HousingData:
    """Fully shaped payload with every metric 'N/A' and every chart empty."""
    return HousingData(metrics=[empty_metric(tracked) for tracked in TRACKED_SERIES])


async def fetch_all_housing_data(
    fetcher: SeriesFetcher,
    *,
    lookback_months: int | None = None,
) -> HousingData:
    """Fetch all tracked series in parallel and build one ``HousingData``.

    Individual series failures degrade to empty data. A missing API key is
    re-raised as ``ConfigurationError``; any other failure while assembling
    the payload yields the fallback payload.
    """

    outcomes = await settle_all(
        fetcher.fetch_series(tracked.series_id, lookback_months=lookback_months)
        for tracked in TRACKED_SERIES
    )

    for outcome in outcomes:
        if isinstance(outcome.error, ConfigurationError):
            raise outcome.error

    try:
        data = _assemble(outcomes)
    except AssemblyError:
        logger.exception("Serving fallback housing payload.")
        return fallback_housing_data()

    loaded = sum(1 for outcome in outcomes if outcome.ok)
    logger.info("Assembled housing data (%s/%s series loaded).", loaded, len(TRACKED_SERIES))
    return data


__all__ = [
    "Settled",
    "SeriesFetcher",
    "settle_all",
    "build_housing_data",
    "fallback_housing_data",
    "fetch_all_housing_data",
]

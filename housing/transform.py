"""Turn raw FRED observations into chart-ready points."""

from __future__ import annotations

import logging
import math
from datetime import date
from typing import Sequence

from housing.model import ChartDataPoint, Observation

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

logger = logging.getLogger(__name__)


def parse_observation_date(raw_date: str) -> date | None:
    try:
        return date.fromisoformat(raw_date[:10])
    except ValueError:
        return None


def parse_value(observation: Observation) -> float | None:
    """Numeric value of an observation, or ``None`` when no usable value exists.

    Values that are present but not finite numbers are treated like the
    missing marker.
    """
    if observation.is_missing:
        return None
    try:
        numeric = float(observation.value)
    except ValueError:
        logger.debug("Dropping non-numeric observation %s=%r", observation.date, observation.value)
        return None
    if math.isnan(numeric) or math.isinf(numeric):
        logger.debug("Dropping non-finite observation %s=%r", observation.date, observation.value)
        return None
    return numeric


def valid_points(observations: Sequence[Observation]) -> list[tuple[date, float]]:
    """Dated numeric values for every usable observation, order preserved."""
    points: list[tuple[date, float]] = []
    for obs in observations:
        value = parse_value(obs)
        if value is None:
            continue
        observed = parse_observation_date(obs.date)
        if observed is None:
            logger.debug("Dropping observation with unparseable date %r", obs.date)
            continue
        points.append((observed, value))
    return points


def month_label(observed: date) -> str:
    return f"{_MONTHS[observed.month - 1]} {observed.year}"


def transform_observations(
    observations: Sequence[Observation], limit: int | None = None
) -> list[ChartDataPoint]:
    """Convert observations to ``ChartDataPoint``s labelled 'Mon YYYY'.

    Missing values are skipped. With ``limit`` only the most recent ``limit``
    valid points are kept, still in chronological order.
    """

    points = valid_points(observations)
    if limit:
        points = points[-limit:]
    return [ChartDataPoint(date=month_label(observed), value=value) for observed, value in points]


__all__ = [
    "transform_observations",
    "parse_value",
    "parse_observation_date",
    "valid_points",
    "month_label",
]

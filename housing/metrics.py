"""Headline metric calculations: latest value, period change and polarity."""

from __future__ import annotations

import math
from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

from housing.model import ChangeType, HousingMetric, Observation
from housing.series import TrackedSeries, ValueStyle
from housing.transform import valid_points

NOT_AVAILABLE = "N/A"
NO_CHANGE = "+0.0%"
YEAR_AGO_TOLERANCE = timedelta(days=45)
_TENTH = Decimal("0.1")


def one_decimal(value: float) -> str:
    """Format to one decimal place, rounding ties away from zero."""
    return str(Decimal(value).quantize(_TENTH, rounding=ROUND_HALF_UP))


def percentage_change(old_value: float, new_value: float) -> str:
    """Signed one-decimal percentage change from ``old_value`` to ``new_value``."""
    if old_value == 0:
        return NO_CHANGE

    change = (new_value - old_value) / old_value * 100
    sign = "+" if change >= 0 else ""
    return f"{sign}{one_decimal(change)}%"


def latest_value(observations: Sequence[Observation]) -> float | None:
    points = valid_points(observations)
    if not points:
        return None
    return points[-1][1]


def _one_year_before(anchor: date) -> date:
    try:
        return anchor.replace(year=anchor.year - 1)
    except ValueError:
        # Feb 29
        return anchor.replace(year=anchor.year - 1, day=28)


def year_over_year_change(observations: Sequence[Observation]) -> str:
    """Change against the observation closest to a year before the latest one.

    Only observations within 45 days of that date qualify; on a tie the
    earlier observation wins.
    """
    points = valid_points(observations)
    if not points:
        return NO_CHANGE

    latest_date, latest = points[-1]
    target = _one_year_before(latest_date)
    candidates = [
        (abs(observed - target), value)
        for observed, value in points
        if abs(observed - target) < YEAR_AGO_TOLERANCE
    ]
    if not candidates:
        return NO_CHANGE
    _, year_ago = min(candidates, key=lambda candidate: candidate[0])
    return percentage_change(year_ago, latest)


def month_over_month_change(observations: Sequence[Observation]) -> str:
    points = valid_points(observations)
    if len(points) < 2:
        return NO_CHANGE
    return percentage_change(points[-2][1], points[-1][1])


def classify_change(change: str, lower_is_better: bool = False) -> ChangeType:
    value = float(change.rstrip("%"))
    if value == 0:
        return "neutral"
    improved = value < 0 if lower_is_better else value > 0
    return "positive" if improved else "negative"


def format_value(value: float | None, style: ValueStyle) -> str:
    if value is None:
        return NOT_AVAILABLE
    if style == "count":
        # Half-up, matching how the dashboard has always rounded counts.
        return f"{math.floor(value + 0.5):,}"
    if style == "percent":
        return f"{one_decimal(value)}%"
    return one_decimal(value)


def summarize(observations: Sequence[Observation], series: TrackedSeries) -> HousingMetric:
    """Build the metric card for ``series`` from its raw observations."""
    if series.comparison == "yoy":
        change = year_over_year_change(observations)
    else:
        change = month_over_month_change(observations)

    return HousingMetric(
        id=series.key,
        title=series.title,
        value=format_value(latest_value(observations), series.value_style),
        change=change,
        change_type=classify_change(change, series.lower_is_better),
        description=series.description,
    )


def empty_metric(series: TrackedSeries) -> HousingMetric:
    return HousingMetric(
        id=series.key,
        title=series.title,
        value=NOT_AVAILABLE,
        change=NO_CHANGE,
        change_type="neutral",
        description=series.description,
    )


__all__ = [
    "NOT_AVAILABLE",
    "NO_CHANGE",
    "percentage_change",
    "latest_value",
    "year_over_year_change",
    "month_over_month_change",
    "classify_change",
    "format_value",
    "summarize",
    "empty_metric",
]

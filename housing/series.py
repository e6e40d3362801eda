"""Static metadata for the Houston FRED series tracked by the dashboard."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Literal

Comparison = Literal["yoy", "mom"]
ValueStyle = Literal["index", "count", "percent"]


@dataclass(frozen=True)
class TrackedSeries:
    """How one FRED series is fetched, summarized and charted."""

    key: str
    series_id: str
    title: str
    comparison: Comparison
    value_style: ValueStyle
    description: str
    chart_attr: str
    chart_key: str
    chart_title: str
    chart_color: str
    y_axis_label: str
    lower_is_better: bool = False


# Houston-The Woodlands-Sugar Land MSA. Order is the order of the metric cards.
TRACKED_SERIES: tuple[TrackedSeries, ...] = (
    TrackedSeries(
        key="hpi",
        series_id="ATNHPIUS26420Q",
        title="House Price Index",
        comparison="yoy",
        value_style="index",
        description="Year-over-year change",
        chart_attr="house_price_index",
        chart_key="housePriceIndex",
        chart_title="Houston House Price Index Trend",
        chart_color="#3b82f6",
        y_axis_label="Index Value",
    ),
    TrackedSeries(
        key="inventory",
        series_id="ACTLISCOU26420",
        title="Active Listings",
        comparison="mom",
        value_style="count",
        description="Month-over-month change",
        chart_attr="active_listings",
        chart_key="activeListings",
        chart_title="Active Housing Listings",
        chart_color="#10b981",
        y_axis_label="Number of Listings",
    ),
    TrackedSeries(
        key="rent",
        series_id="CUUSA318SEHA",
        title="Rental CPI",
        comparison="yoy",
        value_style="index",
        description="Year-over-year change",
        chart_attr="rent_cpi",
        chart_key="rentCPI",
        chart_title="Rental Consumer Price Index",
        chart_color="#8b5cf6",
        y_axis_label="CPI Value",
    ),
    TrackedSeries(
        key="permits",
        series_id="HOUS448BPPRIV",
        title="Building Permits",
        comparison="mom",
        value_style="count",
        description="Monthly permits issued",
        chart_attr="building_permits",
        chart_key="buildingPermits",
        chart_title="Building Permits Issued",
        chart_color="#f59e0b",
        y_axis_label="Permits",
    ),
    TrackedSeries(
        key="unemployment",
        series_id="HOUS448URN",
        title="Unemployment Rate",
        comparison="mom",
        value_style="percent",
        description="Month-over-month change",
        chart_attr="unemployment_rate",
        chart_key="unemploymentRate",
        chart_title="Unemployment Rate",
        chart_color="#ef4444",
        y_axis_label="Percentage (%)",
        lower_is_better=True,
    ),
)


def get_series_by_key(key: str) -> TrackedSeries | None:
    for series in TRACKED_SERIES:
        if series.key == key:
            return series
    return None


def iter_series(keys: Iterable[str] | None = None) -> Iterable[TrackedSeries]:
    if keys is None:
        return TRACKED_SERIES
    selected = []
    for key in keys:
        series = get_series_by_key(key)
        if series:
            selected.append(series)
    return tuple(selected)


__all__ = ["TrackedSeries", "TRACKED_SERIES", "get_series_by_key", "iter_series"]

"""Data model shared by the fetcher, the transforms and the HTTP layer."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

MISSING_MARKERS = frozenset({".", ""})

METRIC_ORDER: tuple[str, ...] = ("hpi", "inventory", "rent", "permits", "unemployment")

ChangeType = Literal["positive", "negative", "neutral"]


class Observation(BaseModel):
    """A single raw FRED observation: an ISO date and a textual value."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True, extra="ignore")

    date: str = Field(..., description="Observation date as reported by FRED (YYYY-MM-DD).")
    value: str = Field(
        ..., description="Decimal number encoded as text, or '.'/'' when no data was reported."
    )

    @field_validator("value", mode="before")
    @classmethod
    def _stringify(cls, value):
        if value is None:
            return ""
        return str(value)

    @property
    def is_missing(self) -> bool:
        return self.value in MISSING_MARKERS


class ChartDataPoint(BaseModel):
    """Display-ready point for a time-series chart."""

    model_config = ConfigDict(frozen=True)

    date: str = Field(..., description="Month/year label, e.g. 'Jan 2024'.")
    value: float = Field(..., description="Observed numeric value.")
    label: Optional[str] = Field(default=None, description="Optional tooltip label.")


class HousingMetric(BaseModel):
    """Headline card: current value plus period-over-period change."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    title: str
    value: str = Field(..., description="Formatted current value or 'N/A'.")
    change: str = Field(..., description="Signed percentage change, e.g. '+5.2%'.")
    change_type: ChangeType = Field(..., alias="changeType")
    description: str = Field(..., description="Comparison basis shown under the change.")


class HousingData(BaseModel):
    """Unified payload consumed by the dashboard."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    metrics: list[HousingMetric]
    house_price_index: list[ChartDataPoint] = Field(default_factory=list, alias="housePriceIndex")
    active_listings: list[ChartDataPoint] = Field(default_factory=list, alias="activeListings")
    building_permits: list[ChartDataPoint] = Field(default_factory=list, alias="buildingPermits")
    rent_cpi: list[ChartDataPoint] = Field(default_factory=list, alias="rentCPI")
    unemployment_rate: list[ChartDataPoint] = Field(
        default_factory=list, alias="unemploymentRate"
    )

    @field_validator("metrics")
    @classmethod
    def _five_metrics_in_order(cls, metrics: list[HousingMetric]) -> list[HousingMetric]:
        ids = tuple(metric.id for metric in metrics)
        if ids != METRIC_ORDER:
            raise ValueError(f"metrics must be {list(METRIC_ORDER)} in order, got {list(ids)}")
        return metrics

    def to_payload(self) -> dict:
        """JSON-ready dict using the dashboard's camelCase field names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def metric(self, metric_id: str) -> HousingMetric:
        for metric in self.metrics:
            if metric.id == metric_id:
                return metric
        raise KeyError(metric_id)


__all__ = [
    "MISSING_MARKERS",
    "METRIC_ORDER",
    "ChangeType",
    "Observation",
    "ChartDataPoint",
    "HousingMetric",
    "HousingData",
]

"""FastAPI service exposing Houston housing indicators to the dashboard."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import Any

from fastapi import Depends, FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from housing.aggregate import fetch_all_housing_data
from housing.config import Settings
from housing.errors import ConfigurationError
from housing.series import TRACKED_SERIES, TrackedSeries
from housing.sources.fred import FredClient

MAX_LOOKBACK_MONTHS = 600
FAILURE_MESSAGE = "Failed to fetch housing data"
APP_LOGGERS = ("api", "housing")

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


def _configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level)
    for name in APP_LOGGERS:
        logging.getLogger(name).setLevel(settings.log_level)


@asynccontextmanager
async def lifespan(_: FastAPI):
    _configure_logging(get_settings())
    yield


app = FastAPI(title="Houston Housing Dashboard API", version="0.1.0", lifespan=lifespan)


def _configure_cors() -> None:
    origins = list(get_settings().cors_origins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        allow_credentials=True,
    )


_configure_cors()


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


def _serialize_series(series: TrackedSeries) -> dict[str, Any]:
    return {
        "id": series.key,
        "seriesId": series.series_id,
        "title": series.title,
        "comparison": series.comparison,
        "chartKey": series.chart_key,
        "chartTitle": series.chart_title,
        "color": series.chart_color,
        "yAxisLabel": series.y_axis_label,
    }


@app.get("/api/series")
def list_series() -> dict[str, Any]:
    items = [_serialize_series(series) for series in TRACKED_SERIES]
    return {"count": len(items), "items": items}


@app.get("/api/housing-data")
async def get_housing_data(
    lookback_months: int | None = Query(
        None,
        ge=1,
        le=MAX_LOOKBACK_MONTHS,
        description="Restrict every series to this many trailing months",
    ),
    settings: Settings = Depends(get_settings),
):
    try:
        data = await fetch_all_housing_data(
            FredClient.from_settings(settings), lookback_months=lookback_months
        )
    except ConfigurationError:
        logger.error("Housing data request failed: FRED API key is not configured.")
        return JSONResponse(
            status_code=500,
            content={"error": FAILURE_MESSAGE, "details": "API key configuration error"},
        )
    except Exception:
        logger.exception("Housing data request failed.")
        return JSONResponse(status_code=500, content={"error": FAILURE_MESSAGE})

    return JSONResponse(
        content=data.to_payload(),
        headers={"Cache-Control": settings.cache_control},
    )

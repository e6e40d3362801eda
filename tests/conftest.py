from __future__ import annotations

from typing import Iterable

import pytest

from housing.config import Settings
from housing.model import Observation


def make_observations(rows: Iterable[tuple[str, str]]) -> list[Observation]:
    return [Observation(date=day, value=value) for day, value in rows]


class FakeFetcher:
    """Stands in for ``FredClient``: serves canned observations or raises per series."""

    def __init__(self, responses: dict[str, list[Observation] | BaseException]):
        self.responses = responses
        self.calls: list[tuple[str, int | None]] = []

    async def fetch_series(self, series_id: str, *, lookback_months: int | None = None):
        self.calls.append((series_id, lookback_months))
        response = self.responses.get(series_id, [])
        if isinstance(response, BaseException):
            raise response
        return response


@pytest.fixture()
def settings() -> Settings:
    return Settings(fred_api_key="test-api-key")


@pytest.fixture()
def houston_observations() -> dict[str, list[Observation]]:
    return {
        "ATNHPIUS26420Q": make_observations([("2023-01-01", "280.0"), ("2024-01-01", "284.5")]),
        "ACTLISCOU26420": make_observations([("2024-01-01", "13000"), ("2024-02-01", "12847")]),
        "HOUS448BPPRIV": make_observations([("2024-01-01", "2200"), ("2024-02-01", "2341")]),
        "CUUSA318SEHA": make_observations([("2023-01-01", "150.0"), ("2024-01-01", "156.8")]),
        "HOUS448URN": make_observations([("2024-01-01", "4.1"), ("2024-02-01", "3.8")]),
    }

from datetime import date

import pytest

from conftest import make_observations
from housing.model import ChartDataPoint
from housing.transform import month_label, transform_observations


def test_transform_observations_to_chart_points():
    observations = make_observations(
        [
            ("2023-01-01", "100.5"),
            ("2023-02-01", "101.2"),
            ("2023-03-01", "."),
            ("2023-04-01", "102.0"),
        ]
    )

    result = transform_observations(observations)

    assert result == [
        ChartDataPoint(date="Jan 2023", value=100.5),
        ChartDataPoint(date="Feb 2023", value=101.2),
        ChartDataPoint(date="Apr 2023", value=102.0),
    ]


def test_transform_empty_observations():
    assert transform_observations([]) == []


def test_transform_only_missing_values_yields_nothing():
    observations = make_observations([("2024-01-01", "."), ("2024-02-01", ""), ("2024-03-01", ".")])

    assert transform_observations(observations) == []


def test_transform_limit_keeps_most_recent_points_in_order():
    observations = make_observations(
        (date(2021 + i // 12, i % 12 + 1, 1).isoformat(), str(100 + i)) for i in range(36)
    )

    result = transform_observations(observations, 24)

    assert len(result) == 24
    assert result[0] == ChartDataPoint(date="Jan 2022", value=112.0)
    assert result[-1] == ChartDataPoint(date="Dec 2023", value=135.0)
    assert [point.value for point in result] == [float(100 + i) for i in range(12, 36)]


def test_transform_limit_counts_only_valid_points():
    observations = make_observations(
        [("2024-01-01", "1"), ("2024-02-01", "2"), ("2024-03-01", "."), ("2024-04-01", "4")]
    )

    result = transform_observations(observations, limit=2)

    assert [point.date for point in result] == ["Feb 2024", "Apr 2024"]


def test_transform_without_limit_keeps_full_history():
    observations = make_observations(
        (date(1990 + i // 12, i % 12 + 1, 1).isoformat(), "5.0") for i in range(400)
    )

    assert len(transform_observations(observations)) == 400


def test_transform_keeps_source_precision():
    observations = make_observations([("2024-05-01", "3.14159")])

    assert transform_observations(observations)[0].value == pytest.approx(3.14159)


@pytest.mark.parametrize("raw", ["abc", "nan", "inf", "1.2.3"])
def test_transform_drops_malformed_values(raw):
    observations = make_observations([("2024-01-01", "10"), ("2024-02-01", raw)])

    result = transform_observations(observations)

    assert result == [ChartDataPoint(date="Jan 2024", value=10.0)]


def test_month_label_uses_observation_calendar_month():
    assert month_label(date(2023, 1, 1)) == "Jan 2023"
    assert month_label(date(2019, 12, 31)) == "Dec 2019"

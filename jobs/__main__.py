"""Command-line entrypoint for dashboard jobs."""

from __future__ import annotations

import argparse
import os
from typing import Iterable

from housing.series import TRACKED_SERIES, TrackedSeries, iter_series
from jobs.snapshot import main as run_snapshot


def _format_series(series: TrackedSeries) -> str:
    basis = "year-over-year" if series.comparison == "yoy" else "month-over-month"
    return (
        f"{series.key}: fred_series={series.series_id} title='{series.title}' "
        f"change={basis} chart={series.chart_key}"
    )


def _resolve_series_from_cli(keys: Iterable[str] | None) -> tuple[TrackedSeries, ...]:
    if not keys:
        return TRACKED_SERIES
    selected = tuple(iter_series(keys))
    unknown = set(keys) - {s.key for s in selected}
    if unknown:
        raise SystemExit(f"Unknown series keys: {', '.join(sorted(unknown))}")
    return selected


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Houston housing dashboard job runner")
    subparsers = parser.add_subparsers(dest="command", required=True)

    snapshot_parser = subparsers.add_parser(
        "snapshot", help="Fetch all tracked series and print the dashboard payload as JSON"
    )
    snapshot_parser.add_argument(
        "--lookback-months",
        type=int,
        help="Only request this many trailing months of each series (defaults to full history)",
    )
    snapshot_parser.add_argument(
        "--output",
        help="Write the JSON payload to this path instead of stdout",
    )
    snapshot_parser.add_argument(
        "--log-level",
        help="Override LOG_LEVEL for this invocation (e.g. DEBUG, INFO)",
    )

    list_parser = subparsers.add_parser("list-series", help="Show tracked FRED series metadata")
    list_parser.add_argument(
        "--series",
        help="Comma-separated list of series keys to show (defaults to all tracked)",
    )

    args = parser.parse_args(argv)

    if args.command == "list-series":
        keys = [item.strip() for item in (args.series or "").split(",") if item.strip()]
        for series in _resolve_series_from_cli(keys):
            print(_format_series(series))
        return 0

    if args.command == "snapshot":
        if args.lookback_months is not None and args.lookback_months < 1:
            parser.error("--lookback-months must be a positive integer")
        if args.log_level:
            os.environ["LOG_LEVEL"] = args.log_level
        return run_snapshot(lookback_months=args.lookback_months, output=args.output)

    parser.error("Unknown command")
    return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

"""One-shot job that fetches the dashboard payload and writes it as JSON."""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from pathlib import Path

from housing.aggregate import fetch_all_housing_data
from housing.config import Settings
from housing.errors import ConfigurationError
from housing.model import HousingData
from housing.sources.fred import FredClient

logger = logging.getLogger(__name__)

EXIT_CONFIG_ERROR = 2


async def snapshot_async(
    settings: Settings,
    *,
    lookback_months: int | None = None,
    client: FredClient | None = None,
) -> HousingData:
    """Fetch every tracked series once and return the assembled payload."""

    client = client or FredClient.from_settings(settings)
    logger.info("Fetching Houston housing snapshot (lookback=%s).", lookback_months or "all")
    return await fetch_all_housing_data(client, lookback_months=lookback_months)


def _write(data: HousingData, output: str | Path | None) -> None:
    text = json.dumps(data.to_payload(), indent=2)
    if output is None:
        sys.stdout.write(text + "\n")
        return
    dest = Path(output)
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_text(text + "\n", encoding="utf-8")
    logger.info("Snapshot written to %s.", dest)


def main(
    *,
    lookback_months: int | None = None,
    output: str | Path | None = None,
    settings: Settings | None = None,
) -> int:
    settings = settings or Settings.from_env()
    logging.basicConfig(level=settings.log_level)
    try:
        data = asyncio.run(snapshot_async(settings, lookback_months=lookback_months))
    except ConfigurationError as exc:
        logger.error("Snapshot aborted: %s", exc)
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    _write(data, output)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

"""Shared HTTP helper for talking to external JSON APIs."""

from __future__ import annotations

from typing import Any, Mapping

import httpx
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)
from tenacity.wait import wait_base

from housing.config import DEFAULT_TIMEOUT_SECONDS

_DEFAULT_WAIT = wait_exponential(min=1, max=16)


Headers = Mapping[str, str] | None
Params = Mapping[str, Any] | None


async def fetch_json(
    url: str,
    *,
    headers: Headers = None,
    params: Params = None,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    attempts: int = 1,
    wait: wait_base = _DEFAULT_WAIT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Any:
    """Issue a GET request and return the decoded JSON payload.

    Only transport-level failures (timeouts, DNS, connection resets) are
    retried, and only when ``attempts`` is greater than one. Non-success
    statuses raise ``httpx.HTTPStatusError`` straight away and an undecodable
    body raises ``ValueError``.
    """

    retrying = AsyncRetrying(
        wait=wait,
        stop=stop_after_attempt(max(1, attempts)),
        retry=retry_if_exception_type(httpx.TransportError),
        reraise=True,
    )
    async for attempt in retrying:
        with attempt:
            async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
                response = await client.get(url, headers=headers, params=params)

            response.raise_for_status()
            return response.json()


__all__ = ["fetch_json"]

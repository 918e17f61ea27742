"""httpx wrapper.

Standardizes timeouts and headers for every Issuetrak call and lets tests swap
the network for an `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings, SubmitterSettings


def build_async_client(
    settings: AppSettings | SubmitterSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the configured defaults."""

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json, text/plain;q=0.9, */*;q=0.8",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )

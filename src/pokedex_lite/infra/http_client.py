"""httpx client construction.

All outbound calls (PokeAPI, remote roster service) share the same
timeouts and headers through ``build_async_client``.
"""

from __future__ import annotations

import httpx

from pokedex_lite.infra.config import http_timeout_seconds

USER_AGENT = "pokedex-lite/0.1.0"


def build_async_client(
    base_url: str = "",
    *,
    timeout: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    extra_headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """Create an ``httpx.AsyncClient`` with the project defaults.

    ``transport`` lets tests plug in ``httpx.MockTransport``.
    """
    headers: dict[str, str] = {
        "User-Agent": USER_AGENT,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        base_url=base_url,
        timeout=httpx.Timeout(timeout if timeout is not None else http_timeout_seconds()),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )

from __future__ import annotations

from typing import Optional

import httpx

from app.core.config import Settings


_client: Optional[httpx.AsyncClient] = None


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    limits = httpx.Limits(max_keepalive_connections=20, max_connections=50)
    kwargs = {}
    if settings.http_timeout_seconds is not None:
        kwargs["timeout"] = httpx.Timeout(settings.http_timeout_seconds)
    return httpx.AsyncClient(
        limits=limits,
        headers={"User-Agent": "weatherpage/0.1"},
        follow_redirects=True,
        **kwargs,
    )


def set_http_client(client: httpx.AsyncClient | None) -> None:
    global _client
    _client = client


def get_http_client() -> httpx.AsyncClient:
    if _client is None:
        raise RuntimeError("HTTP client not initialized. Did you start the FastAPI app?")
    return _client

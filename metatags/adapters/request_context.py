"""
Request context adapters for defaulting og:url.
"""

from __future__ import annotations

from dataclasses import dataclass

from starlette.requests import Request


class StarletteRequestContext:
    """Reads host, scheme and path from a Starlette/FastAPI request."""

    def __init__(self, request: Request) -> None:
        self._request = request

    @property
    def current_host(self) -> str:
        return self._request.headers.get("host") or self._request.url.netloc

    @property
    def is_secure(self) -> bool:
        return self._request.url.scheme == "https"

    @property
    def request_path(self) -> str:
        url = self._request.url
        return f"{url.path}?{url.query}" if url.query else url.path


@dataclass(frozen=True)
class StaticRequestContext:
    """Fixed request details, for scripts and tests."""

    current_host: str
    request_path: str = "/"
    is_secure: bool = True

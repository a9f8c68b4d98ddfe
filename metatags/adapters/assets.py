"""
Asset URL resolver backed by a site base URL.
"""

from __future__ import annotations

from urllib.parse import urljoin


class BaseUrlAssetResolver:
    """
    Resolves relative asset paths against a base URL.

    "img/a.png" with base "https://example.com/static" ->
    "https://example.com/static/img/a.png"
    """

    def __init__(self, base_url: str) -> None:
        self._base_url = base_url.rstrip("/") + "/"

    def __call__(self, path: str) -> str:
        return urljoin(self._base_url, path.lstrip("/"))

"""
Meta component port definitions.

All collaborators are optional; the manager works without any of them.
"""

from __future__ import annotations

from typing import Protocol


class AssetResolverPort(Protocol):
    """Turns a relative asset path into an absolute URL."""

    def __call__(self, path: str) -> str: ...


class RequestContextPort(Protocol):
    """Request details used to default the page URL."""

    @property
    def current_host(self) -> str:
        """Host (and port, if any) of the current request."""
        ...

    @property
    def is_secure(self) -> bool:
        """True when the request arrived over HTTPS."""
        ...

    @property
    def request_path(self) -> str:
        """Path plus query string of the current request."""
        ...


class ViewContentPort(Protocol):
    """Access to named content blocks of the view being rendered."""

    def yield_content(self, block_name: str) -> str:
        """Get the block's content ("" when the block is not defined)."""
        ...

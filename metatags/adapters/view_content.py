"""
View content adapter over a plain mapping of named blocks.
"""

from __future__ import annotations

from collections.abc import Mapping


class StaticViewContent:
    def __init__(self, blocks: Mapping[str, str] | None = None) -> None:
        self._blocks = dict(blocks or {})

    def yield_content(self, block_name: str) -> str:
        return self._blocks.get(block_name, "")

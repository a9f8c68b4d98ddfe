"""
TagStore - storage for renderable tag entries.

Two namespaces:
- general: rendered as og:{name} (plus the bare description tag)
- twitter: rendered as twitter:{name}

Entries keep insertion order; overwriting a key keeps its position and
replaces value and attributes wholesale.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from metatags.domain.paths import expand_dotted, lookup

GENERAL = "general"
TWITTER = "twitter"
NAMESPACES = (GENERAL, TWITTER)


@dataclass
class TagEntry(Mapping[str, Any]):
    """
    One renderable tag.

    Behaves as a read-only mapping with the keys "value" and "attributes" so
    dotted-path lookups can walk into it.
    """

    value: str = ""
    attributes: dict[str, Any] = field(default_factory=dict)

    def __getitem__(self, key: str) -> Any:
        if key == "value":
            return self.value
        if key == "attributes":
            return self.attributes
        raise KeyError(key)

    def __iter__(self) -> Iterator[str]:
        return iter(("value", "attributes"))

    def __len__(self) -> int:
        return 2


class TagStore:
    """Tag tree owned by a single manager; not safe for concurrent mutation."""

    def __init__(self) -> None:
        self._tags: dict[str, dict[str, TagEntry]] = {
            GENERAL: {"type": TagEntry("website")},
            TWITTER: {},
        }

    def put(self, namespace: str, name: str, entry: TagEntry) -> None:
        self._tags[namespace][name] = entry

    def get(self, key: str, namespace: str = GENERAL) -> Any:
        """
        Exact key first, then a dotted walk over the namespace.

        The walk treats "." in tag names as grouping, so with a "music.song"
        entry `get("music")` returns {"song": entry}, and
        `get("music.song.attributes")` returns that entry's attributes.
        """
        tags = self._tags[namespace]
        if key in tags:
            return tags[key]
        return lookup(expand_dotted(tags), key)

    def forget(self, key: str, namespace: str = GENERAL) -> None:
        self._tags[namespace].pop(key, None)

    def has(self, key: str, namespace: str = GENERAL) -> bool:
        return key in self._tags[namespace]

    def entries(self, namespace: str = GENERAL) -> list[tuple[str, TagEntry]]:
        return list(self._tags[namespace].items())

    def __len__(self) -> int:
        return sum(len(tags) for tags in self._tags.values())

    def snapshot(self) -> dict[str, dict[str, TagEntry]]:
        """Shallow copy of the tree, for tests and debugging."""
        return {namespace: dict(tags) for namespace, tags in self._tags.items()}

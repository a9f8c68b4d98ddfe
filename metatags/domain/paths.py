"""
Dotted-path lookup over nested mappings.

Used by both the config store ("truncate.description") and the tag store
("image.attributes.width").
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

_MISSING = object()


def lookup(data: Mapping[str, Any], key: str, default: Any = None) -> Any:
    """
    Resolve `key` against `data`.

    An exact top-level key always wins. Otherwise the key is split on "." and
    walked segment by segment; `default` is returned as soon as a segment is
    missing or the current node is not a mapping.
    """
    if key in data:
        return data[key]

    node: Any = data
    for segment in key.split("."):
        if not isinstance(node, Mapping):
            return default
        node = node.get(segment, _MISSING)
        if node is _MISSING:
            return default

    return node


def expand_dotted(data: Mapping[str, Any]) -> dict[str, Any]:
    """
    Build a nested view of a flat mapping whose keys use "." for grouping.

    {"music.song": x, "title": y} -> {"music": {"song": x}, "title": y}

    A literal key that collides with a group keeps its own value, and deeper
    keys under it ("a.b.c" next to "a.b") are left out of the view.
    """
    nested: dict[str, Any] = {}
    for key, value in data.items():
        *groups, leaf = key.split(".")
        node = nested
        for depth, group in enumerate(groups, start=1):
            if ".".join(groups[:depth]) in data:
                break
            child = node.setdefault(group, {})
            if not isinstance(child, dict):
                break
            node = child
        else:
            node[leaf] = value
    return nested

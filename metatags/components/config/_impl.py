"""
ConfigStore - runtime options with dotted-path lookup.

Recognized options:
- validate: bool (default False) - raise on unknown types, attributes, URLs
- twitter: bool (default True) - emit the Twitter Card block
- truncate: mapping of rendered tag name -> character limit

Merging is shallow: a caller-supplied `truncate` replaces the default
mapping wholesale.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from metatags.domain.paths import lookup
from metatags.rules.models import DEFAULT_TRUNCATE, MetaTagsConfig

DEFAULT_CONFIG: Mapping[str, Any] = MappingProxyType(
    {
        "validate": False,
        "twitter": True,
        "truncate": MappingProxyType(dict(DEFAULT_TRUNCATE)),
    }
)


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _thaw(v) for k, v in value.items()}
    return value


class ConfigStore:
    """Read-only option store."""

    def __init__(self, overrides: Mapping[str, Any] | None = None) -> None:
        merged = _thaw(DEFAULT_CONFIG)
        for name, value in (overrides or {}).items():
            merged[name] = _thaw(value)

        # Raises pydantic.ValidationError on badly typed known options
        model = MetaTagsConfig.model_validate(merged)
        self._data: Mapping[str, Any] = _freeze(model.model_dump(by_alias=True))

    def resolve(self, key: str, default: Any = None) -> Any:
        """Look up an option by exact name or dotted path."""
        return lookup(self._data, key, default)

    @property
    def validate(self) -> bool:
        return self.resolve("validate", False) is True

    @property
    def twitter(self) -> bool:
        return bool(self.resolve("twitter", True))

    def truncate_limit(self, tag_name: str) -> int | None:
        """Character limit configured for a rendered tag name, if any."""
        limit = self.resolve(f"truncate.{tag_name}")
        return limit if isinstance(limit, int) and limit > 0 else None

    def as_dict(self) -> dict[str, Any]:
        return _thaw(self._data)

    def __repr__(self) -> str:
        return f"ConfigStore({self.as_dict()!r})"

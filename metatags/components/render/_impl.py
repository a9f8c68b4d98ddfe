"""
TagRenderer - serializes a TagStore into <meta> lines.

Key behaviors:
- Truncation limits are looked up by the rendered name ("og:description")
- A tag with an empty value renders only its attribute lines
- Attribute values may nest (mappings) or repeat (lists)
- Twitter title/description and image fall back to the general entries
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from metatags.components.config import ConfigStore
from metatags.components.normalize import sanitize_text, truncate
from metatags.components.tags import GENERAL, TWITTER, TagEntry, TagStore

META_TEMPLATE = '<meta property="{name}" content="{value}">'


def render_meta_tag(name: str, value: str) -> str:
    return META_TEMPLATE.format(name=name, value=value)


class TagRenderer:
    """Renders one manager's tags; holds no state of its own."""

    def __init__(self, config: ConfigStore, store: TagStore) -> None:
        self._config = config
        self._store = store

    def render(self, twitter: bool | None = None) -> list[str]:
        """
        Render every tag as a list of lines.

        Args:
            twitter: Emit the Twitter block. Defaults to the config option.
        """
        if twitter is None:
            twitter = self._config.twitter

        general = dict(self._store.entries(GENERAL))
        lines: list[str] = []

        # Plain description tag, without the og: prefix
        description = general.get("description")
        if description is not None:
            lines.extend(self.render_tag("description", description.value, description.attributes))

        for name, entry in general.items():
            lines.extend(self.render_tag(f"og:{name}", entry.value, entry.attributes))

        if twitter:
            lines.extend(self.render_twitter())

        return lines

    def render_twitter(self) -> list[str]:
        general = dict(self._store.entries(GENERAL))
        twitter = dict(self._store.entries(TWITTER))
        lines: list[str] = []

        for name in ("title", "description"):
            entry = general.get(name)
            if entry is not None:
                lines.extend(self.render_tag(f"twitter:{name}", entry.value, entry.attributes))

        for name, entry in twitter.items():
            if name == "image":
                lines.extend(self.render_twitter_image(entry))
            elif name == "image:alt":
                # Emitted together with the image
                continue
            else:
                lines.extend(self.render_tag(f"twitter:{name}", entry.value, entry.attributes))

        if "image" not in twitter and "image" in general:
            lines.extend(self.render_twitter_image(general["image"]))

        return lines

    def render_twitter_image(self, image: TagEntry | None) -> list[str]:
        if image is None:
            return []

        lines = self.render_tag("twitter:image", image.value, image.attributes)

        alt = self._store.get("image:alt", TWITTER)
        if isinstance(alt, TagEntry):
            lines.extend(self.render_tag("twitter:image:alt", alt.value, alt.attributes))

        return lines

    def render_tag(
        self,
        name: str,
        value: str,
        attributes: Mapping[str, Any] | None = None,
    ) -> list[str]:
        """Render one tag and, recursively, its attributes."""
        lines: list[str] = []

        limit = self._config.truncate_limit(name)
        if limit and value:
            value = truncate(value, limit)

        # Namespace-only tags have no line of their own
        if value:
            lines.append(render_meta_tag(name, value))

        for attr_name, attr_value in (attributes or {}).items():
            lines.extend(self._render_attribute(f"{name}:{attr_name}", attr_value))

        return lines

    def _render_attribute(self, name: str, value: Any) -> list[str]:
        if isinstance(value, TagEntry):
            return self.render_tag(name, value.value, value.attributes)
        if isinstance(value, Mapping):
            return self.render_tag(name, "", value)
        if isinstance(value, list | tuple):
            lines: list[str] = []
            for item in value:
                lines.extend(self._render_attribute(name, item))
            return lines
        return self.render_tag(name, sanitize_text(value))

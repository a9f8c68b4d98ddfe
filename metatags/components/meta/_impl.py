"""
Manager - fluent Open Graph / Twitter Card tag builder.

Calls flow: fluent setter -> set() -> normalizer -> tag store; rendering
reads the store through TagRenderer.

Key behaviors:
- Unknown method names become tags: `site_name("x")` / `siteName("x")`
  set `og:site_name`
- article/book/profile set attribute-only namespace tags
- `twitter({...})` bulk-sets twitter:* tags
- `twitter_*` tag names go to the twitter namespace and force the Twitter
  block on

One manager per rendering context; instances are not safe for concurrent
mutation.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping
from typing import Any

from metatags.components.config import ConfigStore
from metatags.components.normalize import (
    AssetResolver,
    coerce_date,
    collapse_whitespace,
    normalize_value,
)
from metatags.components.render import TagRenderer
from metatags.components.tags import GENERAL, TWITTER, TagEntry, TagStore
from metatags.components.validation import validate_attributes, validate_type
from metatags.domain.errors import ArityError

from .ports import RequestContextPort, ViewContentPort

logger = logging.getLogger(__name__)

NAMESPACE_TAGS = ("article", "book", "profile")
TWITTER_PREFIX = "twitter_"

_CAMEL_BOUNDARY = re.compile(r"(?<!^)[A-Z]")


def snake_case(method: str) -> str:
    """siteName -> site_name"""
    return _CAMEL_BOUNDARY.sub(lambda m: "_" + m.group(0), method).lower()


class Manager:
    """
    Collects tags and renders them as <meta> markup.

    Args:
        config: Option overrides (or a ready ConfigStore)
        asset_resolver: Rewrites relative URL values to absolute ones
        request_context: Source for `url()` without arguments
        view_content: Source for the fallback title in `render()`

    Reserved names: `tag`, `type`, `url`, `get`, `set`, `forget`, `article`,
    `book`, `profile`, `twitter`, `config`, `twitter_enabled`, `lines`,
    `render`, `render_twitter_image`, `setter` and `validation` are real
    members and never become tags through attribute access. Set tags with
    those names through `set(name, value)` or `setter(name)(value)`.
    """

    def __init__(
        self,
        config: Mapping[str, Any] | ConfigStore | None = None,
        *,
        asset_resolver: AssetResolver | None = None,
        request_context: RequestContextPort | None = None,
        view_content: ViewContentPort | None = None,
    ) -> None:
        self._config = config if isinstance(config, ConfigStore) else ConfigStore(config)
        self._store = TagStore()
        self._renderer = TagRenderer(self._config, self._store)
        self._asset_resolver = asset_resolver
        self._request_context = request_context
        self._view_content = view_content
        self._force_twitter = False

    @property
    def config(self) -> ConfigStore:
        return self._config

    @property
    def twitter_enabled(self) -> bool:
        return self._config.twitter or self._force_twitter

    # --- Fixed setters ---

    def tag(self, name: str, value: Any) -> Manager:
        """Add a custom tag; dates are formatted as ISO-8601."""
        return self.set(name, coerce_date(value))

    def type(self, content_type: str) -> Manager:
        """
        Set og:type.

        Raises ValidationError for unknown types when `validate` is on.
        """
        if self._config.validate:
            validate_type(content_type)
        return self.set("type", content_type)

    def url(self, url: str | None = None) -> Manager:
        """Set og:url, defaulting to the current request's URL."""
        if not url and self._request_context is not None:
            ctx = self._request_context
            scheme = "https" if ctx.is_secure else "http"
            url = f"{scheme}://{ctx.current_host}{ctx.request_path}"
            logger.debug("Defaulted og:url to %s", url)
        return self.set("url", url)

    def article(self, attributes: Mapping[str, Any] | None = None) -> Manager:
        return self._namespace("article", attributes)

    def book(self, attributes: Mapping[str, Any] | None = None) -> Manager:
        return self._namespace("book", attributes)

    def profile(self, attributes: Mapping[str, Any] | None = None) -> Manager:
        return self._namespace("profile", attributes)

    def twitter(self, tags: Mapping[str, Any] | None = None) -> Manager:
        """Bulk-set twitter:* tags: `twitter({"card": "summary"})`."""
        if tags is None:
            raise ArityError("twitter")
        for name, value in tags.items():
            self.set(f"{TWITTER_PREFIX}{name}", value)
        return self

    def _namespace(self, name: str, attributes: Mapping[str, Any] | None) -> Manager:
        if attributes is None:
            raise ArityError(name)
        return self.set(name, None, attributes)

    # --- Dynamic setters ---

    def setter(self, method: str) -> Callable[..., Manager]:
        """
        Build the setter for a method name that has no fixed method.

        The returned callable takes `(value, attributes=None)`.
        """
        if method in NAMESPACE_TAGS or method == "twitter":
            return getattr(self, method)

        name = snake_case(method)

        def set_tag(*args: Any, **kwargs: Any) -> Manager:
            if not args and "value" not in kwargs:
                raise ArityError(name)
            return self.set(name, *args, **kwargs)

        set_tag.__name__ = name
        return set_tag

    def __getattr__(self, method: str) -> Callable[..., Manager]:
        # Only reached for names that are not real attributes
        if method.startswith("_"):
            raise AttributeError(method)
        return self.setter(method)

    # --- Tag store access ---

    def set(
        self,
        name: str,
        value: Any,
        attributes: Mapping[str, Any] | None = None,
    ) -> Manager:
        """
        Store a tag.

        A None value without attributes is a no-op. Names starting with
        "twitter_" go to the twitter namespace with "_" turned into ":".

        Raises ValidationError (only while `validate` is on) for disallowed
        attribute names or malformed URLs.
        """
        attributes = dict(attributes or {})
        if value is None and not attributes:
            return self

        validate = self._config.validate
        if validate and attributes:
            self.validation(name, attributes)

        text = normalize_value(name, value, self._asset_resolver, validate)

        namespace = GENERAL
        if name.startswith(TWITTER_PREFIX):
            namespace = TWITTER
            name = name[len(TWITTER_PREFIX) :].replace("_", ":")
            # Ensure the tag is rendered
            self._force_twitter = True

        self._store.put(namespace, name, TagEntry(text, attributes))
        logger.debug("Set %s tag %r", namespace, name)
        return self

    def get(self, key: str, namespace: str = GENERAL) -> Any:
        return self._store.get(key, namespace)

    def forget(self, key: str, namespace: str = GENERAL) -> None:
        self._store.forget(key, namespace)

    def validation(self, content_type: str, attributes: Mapping[str, Any] | None = None) -> bool:
        """Check attribute names for a content type; raises ValidationError."""
        return validate_attributes(content_type, attributes or {})

    # --- Rendering ---

    def lines(self) -> list[str]:
        return self._renderer.render(twitter=self.twitter_enabled)

    def render_twitter_image(self, image: TagEntry | None = None) -> str:
        return "\n".join(self._renderer.render_twitter_image(image))

    def render(self) -> str:
        """
        Render all tags, taking the page title from the view when none is set.
        """
        if not self._store.has("title") and self._view_content is not None:
            title = collapse_whitespace(self._view_content.yield_content("title") or "")
            if title:
                logger.debug("Using view title block as page title")
                self.set("title", title)

        return str(self)

    def __str__(self) -> str:
        return "\n".join(self.lines())

    def __repr__(self) -> str:
        return f"<Manager tags={len(self._store)} config={self._config!r}>"

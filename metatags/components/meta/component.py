"""
Meta component - declarative entry point.

Builds a Manager from a RenderMetaTagsInput and reports validation failures
as data instead of raising.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as ConfigValidationError

from metatags.domain.errors import ValidationError

from ._impl import Manager
from .models import RenderMetaTagsInput, RenderMetaTagsOutput, RenderValidationError
from .ports import AssetResolverPort, RequestContextPort, ViewContentPort


def _apply_tag(manager: Manager, name: str, tag_value: Any) -> None:
    if isinstance(tag_value, Mapping) and "value" in tag_value:
        manager.set(name, tag_value["value"], tag_value.get("attributes") or {})
    else:
        manager.tag(name, tag_value)


def run(
    inp: RenderMetaTagsInput,
    *,
    asset_resolver: AssetResolverPort | None = None,
    request_context: RequestContextPort | None = None,
    view_content: ViewContentPort | None = None,
) -> RenderMetaTagsOutput:
    """
    Render the tags described by `inp`.

    Args:
        inp: Tags, options and namespace attributes.
        asset_resolver: Optional relative-URL resolver.
        request_context: Optional source for the default og:url.
        view_content: Optional source for the fallback title.

    Returns:
        RenderMetaTagsOutput with the markup, or errors and success=False.
    """
    try:
        manager = Manager(
            inp.config,
            asset_resolver=asset_resolver,
            request_context=request_context,
            view_content=view_content,
        )
    except ConfigValidationError as e:
        return RenderMetaTagsOutput(
            errors=[RenderValidationError(code="invalid_config", message=str(e))],
            success=False,
        )

    try:
        if inp.content_type is not None:
            manager.type(inp.content_type)
        if inp.url is not None or request_context is not None:
            manager.url(inp.url)
        for name, tag_value in inp.tags.items():
            _apply_tag(manager, name, tag_value)
        for name, attributes in inp.namespaces.items():
            manager.set(name, None, attributes)
        if inp.twitter:
            manager.twitter(inp.twitter)
    except ValidationError as e:
        return RenderMetaTagsOutput(
            errors=[RenderValidationError(code=e.code, message=e.message, field=e.field)],
            success=False,
        )

    html = manager.render()
    return RenderMetaTagsOutput(html=html, lines=tuple(html.splitlines()))

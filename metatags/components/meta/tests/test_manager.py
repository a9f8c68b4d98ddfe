"""
Unit tests for the fluent Manager.

Tests:
- dynamic setters and the method table
- twitter_* routing and the bulk twitter setter
- validation gating
- collaborators: request context, asset resolver, view content
"""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from metatags.adapters import BaseUrlAssetResolver, StaticRequestContext, StaticViewContent
from metatags.components.config import ConfigStore
from metatags.components.meta import Manager, snake_case
from metatags.components.tags import TagEntry
from metatags.domain.errors import ArityError, ValidationError


def meta(name: str, value: str) -> str:
    return f'<meta property="{name}" content="{value}">'


@pytest.fixture
def og() -> Manager:
    return Manager()


@pytest.fixture
def strict() -> Manager:
    return Manager({"validate": True, "twitter": False})


class TestSnakeCase:
    @pytest.mark.parametrize(
        ("method", "expected"),
        [("siteName", "site_name"), ("title", "title"), ("SiteName", "site_name")],
    )
    def test_conversion(self, method: str, expected: str) -> None:
        """camelCase names become snake_case tag names."""
        assert snake_case(method) == expected


class TestDynamicSetters:
    def test_unknown_method_sets_tag(self, og: Manager) -> None:
        """Any method name becomes a tag."""
        og.locale("en_GB")
        assert og.get("locale") == TagEntry("en_GB", {})

    def test_camel_case_method(self, og: Manager) -> None:
        """camelCase method names are snake-cased."""
        og.siteName("Lab")
        assert og.get("site_name") == TagEntry("Lab", {})

    def test_setter_takes_attributes(self, og: Manager) -> None:
        """The second argument is the attribute map."""
        og.image("http://x/y.png", {"width": 1200})
        assert og.get("image") == TagEntry("http://x/y.png", {"width": 1200})

    def test_chaining(self, og: Manager) -> None:
        """Setters return the manager."""
        assert og.title("A").description("B").siteName("C") is og

    def test_missing_value_raises(self, og: Manager) -> None:
        """Zero-argument dynamic calls raise ArityError."""
        with pytest.raises(ArityError) as exc_info:
            og.siteName()
        assert "[site_name]" in str(exc_info.value)

    def test_arity_ignores_validate_flag(self) -> None:
        """ArityError is raised with validation off."""
        with pytest.raises(ArityError):
            Manager({"validate": False}).title()

    def test_private_names_are_not_tags(self, og: Manager) -> None:
        """Underscore names raise AttributeError."""
        with pytest.raises(AttributeError):
            og._missing  # noqa: B018

    def test_reserved_names_set_through_setter(self, og: Manager) -> None:
        """Names taken by real members are set via setter() or set()."""
        assert isinstance(og.config, ConfigStore)
        og.setter("lines")("x")
        og.set("render", "y")

        assert og.get("lines") == TagEntry("x", {})
        assert og.get("render") == TagEntry("y", {})
        assert callable(og.render)

    def test_setter_lookup(self, og: Manager) -> None:
        """setter() resolves fixed methods and builds generic ones."""
        assert og.setter("article") == og.article
        og.setter("determiner")("the")
        assert og.get("determiner") == TagEntry("the", {})


class TestSet:
    def test_none_without_attributes_is_noop(self, og: Manager) -> None:
        """Repeated no-op sets leave the tree unchanged."""
        before = str(og)
        og.set("title", None).set("title", None)
        assert og.get("title") is None
        assert str(og) == before

    def test_none_with_attributes_stored(self, og: Manager) -> None:
        """Attribute-only tags are stored with an empty value."""
        og.set("article", None, {"section": "News"})
        assert og.get("article") == TagEntry("", {"section": "News"})

    def test_overwrite_replaces_attributes(self, og: Manager) -> None:
        """Repeated sets do not merge attributes."""
        og.image("http://x/a.png", {"width": 1})
        og.image("http://x/b.png")
        assert og.get("image") == TagEntry("http://x/b.png", {})

    def test_value_normalized(self, og: Manager) -> None:
        """Values are sanitized on set."""
        og.title("  <b>Hello</b>   World ☃ ")
        assert og.get("title").value == "Hello World"

    def test_twitter_prefix_routes_to_twitter(self, og: Manager) -> None:
        """twitter_* names go to the twitter namespace with ':' separators."""
        og.set("twitter_creator_id", "42")
        assert og.get("creator:id", "twitter") == TagEntry("42", {})
        assert og.get("twitter_creator_id") is None

    def test_twitter_prefix_forces_twitter_block(self) -> None:
        """Setting a twitter tag turns the block on."""
        og = Manager({"twitter": False})
        og.set("twitter_card", "summary")

        assert og.twitter_enabled is True
        assert og.config.twitter is False
        assert str(og) == "\n".join([meta("og:type", "website"), meta("twitter:card", "summary")])

    def test_forget(self, og: Manager) -> None:
        """forget removes a single key."""
        og.title("A")
        og.forget("title")
        og.forget("title")
        assert og.get("title") is None

    def test_forget_type(self, og: Manager) -> None:
        """Even the seeded type can be removed."""
        og.forget("type")
        assert str(og) == ""


class TestNamespaceTags:
    def test_article(self, og: Manager) -> None:
        """article() stores attributes under a valueless tag."""
        published = datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC)
        og.article({"published_time": published, "tag": ["python", "web"]})

        assert og.lines() == [
            meta("og:type", "website"),
            meta("og:article:published_time", "2024-01-02T03:04:05+0000"),
            meta("og:article:tag", "python"),
            meta("og:article:tag", "web"),
        ]

    @pytest.mark.parametrize("method", ["article", "book", "profile", "twitter"])
    def test_missing_argument(self, og: Manager, method: str) -> None:
        """Namespace and bulk setters need their mapping."""
        with pytest.raises(ArityError):
            getattr(og, method)()

    def test_validated_against_table(self, strict: Manager) -> None:
        """Unknown attributes raise when validating."""
        strict.profile({"first_name": "Ann"})
        with pytest.raises(ValidationError):
            strict.article({"foo": "bar"})

    def test_not_validated_by_default(self, og: Manager) -> None:
        """Unknown attributes pass when not validating."""
        og.article({"foo": "bar"})
        assert og.get("article.attributes.foo") == "bar"


class TestTwitterBulk:
    def test_bulk_setter(self, og: Manager) -> None:
        """Each key becomes a twitter:* tag."""
        og.twitter({"card": "summary_large_image", "site": "@lab", "image_alt": "Cover"})

        assert og.get("card", "twitter") == TagEntry("summary_large_image", {})
        assert og.get("image:alt", "twitter") == TagEntry("Cover", {})

    def test_bulk_image_is_a_url(self) -> None:
        """twitter image values are resolved like other URL tags."""
        og = Manager(asset_resolver=BaseUrlAssetResolver("https://cdn.example.com"))
        og.twitter({"image": "/cover.png"})
        assert og.get("image", "twitter").value == "https://cdn.example.com/cover.png"

    def test_render_twitter_image(self, og: Manager) -> None:
        """render_twitter_image renders an entry plus the stored alt."""
        og.twitter({"image_alt": "Cover"})
        html = og.render_twitter_image(TagEntry("http://x/y.png", {"width": 10}))

        assert html == "\n".join(
            [
                meta("twitter:image", "http://x/y.png"),
                meta("twitter:image:width", "10"),
                meta("twitter:image:alt", "Cover"),
            ]
        )
        assert og.render_twitter_image() == ""


class TestTypeAndValidation:
    def test_unknown_type_accepted_without_validation(self, og: Manager) -> None:
        """type() never raises with validation off."""
        og.type("not-a-real-type")
        assert og.get("type").value == "not-a-real-type"

    def test_unknown_type_rejected_with_validation(self, strict: Manager) -> None:
        """type() raises with validation on."""
        with pytest.raises(ValidationError):
            strict.type("not-a-real-type")

    def test_known_type(self, strict: Manager) -> None:
        """Known types are stored."""
        strict.type("video.episode")
        assert strict.get("type").value == "video.episode"

    def test_invalid_url_rejected(self, strict: Manager) -> None:
        """Malformed URLs raise with validation on."""
        with pytest.raises(ValidationError) as exc_info:
            strict.url("Moo!")
        assert exc_info.value.code == "invalid_url"

    def test_empty_url_rejected(self, strict: Manager) -> None:
        """An empty image URL fails validation."""
        with pytest.raises(ValidationError) as exc_info:
            strict.image("")
        assert exc_info.value.code == "invalid_url"

    def test_invalid_url_accepted_without_validation(self, og: Manager) -> None:
        """Malformed URLs are kept with validation off."""
        og.url("Moo!")
        assert og.get("url").value == "Moo!"

    def test_validation_method(self, og: Manager) -> None:
        """validation() is usable directly."""
        assert og.validation("book", {"isbn": "1"}) is True
        with pytest.raises(ValidationError):
            og.validation("book", {"pages": 10})

    def test_accepts_config_store(self) -> None:
        """A ready ConfigStore is used as-is."""
        config = ConfigStore({"twitter": False})
        assert Manager(config).config is config


class TestCollaborators:
    def test_tag_formats_dates(self, og: Manager) -> None:
        """tag() formats datetimes."""
        og.tag("updated_time", datetime(2024, 5, 6, 7, 8, 9, tzinfo=UTC))
        assert og.get("updated_time").value == "2024-05-06T07:08:09+0000"

    def test_url_from_request_context(self) -> None:
        """url() without a value uses the request context."""
        ctx = StaticRequestContext("example.com", "/posts/1?x=2", is_secure=True)
        og = Manager(request_context=ctx)
        og.url()
        assert og.get("url").value == "https://example.com/posts/1?x=2"

    def test_url_without_context_is_noop(self, og: Manager) -> None:
        """url() without value or context sets nothing."""
        og.url()
        assert og.get("url") is None

    def test_explicit_url_beats_context(self) -> None:
        """A given URL is used as-is."""
        og = Manager(request_context=StaticRequestContext("example.com", "/x", is_secure=False))
        og.url("http://lyften.com")
        assert og.get("url").value == "http://lyften.com"

    def test_relative_image_resolved(self) -> None:
        """Relative image paths go through the asset resolver."""
        og = Manager(
            {"validate": True},
            asset_resolver=BaseUrlAssetResolver("https://example.com/static"),
        )
        og.image("img/cover.png")
        assert og.get("image").value == "https://example.com/static/img/cover.png"

    def test_render_uses_view_title(self) -> None:
        """render() falls back to the view's title block."""
        og = Manager(view_content=StaticViewContent({"title": "  My \n  Page  "}))
        assert og.render() == "\n".join(
            [
                meta("og:type", "website"),
                meta("og:title", "My Page"),
                meta("twitter:title", "My Page"),
            ]
        )

    def test_render_keeps_explicit_title(self) -> None:
        """An explicit title wins over the view block."""
        og = Manager(view_content=StaticViewContent({"title": "View"}))
        og.title("Explicit")
        assert meta("og:title", "Explicit") in og.render()

    def test_render_with_empty_view_block(self) -> None:
        """An empty title block adds nothing."""
        og = Manager({"twitter": False}, view_content=StaticViewContent())
        assert og.render() == meta("og:type", "website")

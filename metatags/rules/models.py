from pydantic import BaseModel, ConfigDict, Field

DEFAULT_TRUNCATE = {
    "description": 160,
    "twitter:title": 70,
    "og:description": 200,
    "twitter:description": 200,
}


class MetaTagsConfig(BaseModel):
    # `validate` shadows a BaseModel method, so it lives behind an alias.
    validate_tags: bool = Field(default=False, alias="validate")
    twitter: bool = True
    truncate: dict[str, int] = Field(default_factory=lambda: dict(DEFAULT_TRUNCATE))

    model_config = ConfigDict(populate_by_name=True, extra="allow")

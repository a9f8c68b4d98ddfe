import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends, Request

from metatags.adapters import BaseUrlAssetResolver, StarletteRequestContext
from metatags.components.config import ConfigStore
from metatags.components.meta import Manager
from metatags.rules.loader import load_config


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        path = os.environ.get("METATAGS_CONFIG")
        self.config_path = Path(path) if path else None
        self.assets_prefix = os.environ.get("METATAGS_ASSETS_PREFIX", "/")


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Config ---
@lru_cache
def _load_config(path: Path | None) -> ConfigStore:
    return load_config(path) if path else ConfigStore()


def get_meta_config(settings: Settings = Depends(get_settings)) -> ConfigStore:
    return _load_config(settings.config_path)


# --- Manager ---
def get_meta_manager(
    request: Request,
    settings: Settings = Depends(get_settings),
    config: ConfigStore = Depends(get_meta_config),
) -> Manager:
    """One manager per request; relative asset URLs resolve against the request's base URL."""
    base_url = str(request.base_url).rstrip("/") + "/" + settings.assets_prefix.strip("/")
    return Manager(
        config,
        asset_resolver=BaseUrlAssetResolver(base_url),
        request_context=StarletteRequestContext(request),
    )

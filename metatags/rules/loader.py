from pathlib import Path

import yaml
from pydantic import ValidationError

from metatags.components.config import ConfigStore


def load_config(path: Path) -> ConfigStore:
    """
    Load a meta tag configuration file and build a ConfigStore from it.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML or its schema is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Meta tags config not found at: {path}")

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in meta tags config: {e}") from e

    # An empty file means "use the defaults"
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("Meta tags config must be a mapping at the top level")

    try:
        return ConfigStore(data)
    except ValidationError as e:
        raise ValueError(f"Meta tags config validation failed:\n{e}") from e

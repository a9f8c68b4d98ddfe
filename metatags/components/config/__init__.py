"""
Config component - runtime options for the tag manager.

Options are merged over the built-in defaults once, at construction, and are
read-only afterwards.
"""

from ._impl import DEFAULT_CONFIG, ConfigStore

__all__ = [
    "DEFAULT_CONFIG",
    "ConfigStore",
]

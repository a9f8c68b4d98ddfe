from pathlib import Path

import pytest

from metatags.components.meta import Manager

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def project_root() -> Path:
    return PROJECT_ROOT


@pytest.fixture
def og() -> Manager:
    """Manager with default options."""
    return Manager()


@pytest.fixture
def og_no_twitter() -> Manager:
    """Manager with the Twitter block disabled."""
    return Manager({"twitter": False})


@pytest.fixture
def og_strict() -> Manager:
    """Validating manager without the Twitter block."""
    return Manager({"validate": True, "twitter": False})

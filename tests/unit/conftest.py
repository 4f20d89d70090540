# tests/unit/conftest.py
from __future__ import annotations

import pytest

from exntree.config import ExnTreeConfig, RenderConfig, reset_config, set_config


@pytest.fixture(autouse=True)
def _default_config():
    """Every test starts and ends with code defaults."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def messages_only() -> RenderConfig:
    """Activate rendering without locations, so output is machine independent."""
    style = RenderConfig(show_location=False)
    set_config(ExnTreeConfig(render=style))
    return style

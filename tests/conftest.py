from __future__ import annotations

import pytest

from glesmath import mode


@pytest.fixture(autouse=True)
def reset_default_mode():
    """Every test starts (and leaves the process) in DEBUG mode."""
    mode.DEFAULT_REGISTRY.set_mode(mode.Mode.DEBUG)
    yield
    mode.DEFAULT_REGISTRY.set_mode(mode.Mode.DEBUG)


@pytest.fixture
def release_mode():
    mode.DEFAULT_REGISTRY.set_mode(mode.Mode.RELEASE)
    yield mode.DEFAULT_REGISTRY

"""
Pytest configuration and shared fixtures.

Provides configs, seed functions, known-ID collections, and isolation of
the TERSEID_* environment and XDG config directory.
"""

import os

import pytest

from terseid.core.config import IdConfig, ResolverConfig
from terseid.core.ids import IdGenerator, IdResolver

# ==============================================================================
# Environment Isolation
# ==============================================================================


@pytest.fixture(autouse=True)
def isolated_config_env(tmp_path, monkeypatch):
    """Point XDG_CONFIG_HOME at an empty directory and drop TERSEID_* vars."""
    for key in list(os.environ):
        if key.startswith("TERSEID_"):
            monkeypatch.delenv(key)
    xdg_home = tmp_path / "xdg"
    xdg_home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg_home))
    return xdg_home


# ==============================================================================
# Config Fixtures
# ==============================================================================


@pytest.fixture
def bd_config():
    """Default generator config for the 'bd' namespace."""
    return IdConfig(prefix="bd")


@pytest.fixture
def generator(bd_config):
    """IdGenerator using the default 'bd' config."""
    return IdGenerator(bd_config)


@pytest.fixture
def resolver():
    """IdResolver with default prefix 'bd' and substring matching on."""
    return IdResolver(ResolverConfig(default_prefix="bd"))


# ==============================================================================
# Sample Data Fixtures
# ==============================================================================


@pytest.fixture
def seed_fn():
    """Seed function mixing fixed content with the nonce."""

    def _seed(nonce: int) -> bytes:
        return f"Fix login redirect loop{nonce}".encode()

    return _seed


@pytest.fixture
def known_ids():
    """A small collection of stored IDs, including a child."""
    return ["bd-a7x3q9", "bd-a7xbb1", "bd-k2m", "bd-k2m.7"]

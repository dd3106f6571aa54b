"""
Pytest configuration and shared fixtures for test suite.
"""

import pytest

from humanise.config import MS_PER_DAY, MS_PER_HOUR, MS_PER_MINUTE, MS_PER_SECOND
from humanise.user_config import get_user_config


@pytest.fixture(autouse=True)
def isolated_user_config(tmp_path, monkeypatch):
    """
    Point the user config at an empty temporary directory.

    Keeps tests independent of ~/.humanise and of HUMANISE_* variables set
    in the developer's shell.
    """
    config_dir = tmp_path / "humanise_config"
    monkeypatch.setenv('HUMANISE_CONFIG_DIR', str(config_dir))
    monkeypatch.delenv('HUMANISE_VERBOSE', raising=False)

    config = get_user_config()
    config.reload()
    yield config_dir
    config.reload()


@pytest.fixture
def unit_lengths():
    """Millisecond length of each unit, keyed by its singular verbose word."""
    return {
        'day': MS_PER_DAY,
        'hour': MS_PER_HOUR,
        'minute': MS_PER_MINUTE,
        'second': MS_PER_SECOND,
        'millisecond': 1,
    }

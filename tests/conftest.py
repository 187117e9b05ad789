import os
from pathlib import Path
from unittest.mock import patch

import pytest

from qutescript.env import EnvironmentSnapshot


@pytest.fixture(autouse=True)
def mock_settings_env_vars(tmp_path):
    """Isolate HOME and drop any QUTE_* variables inherited from the runner."""
    fake_home = tmp_path / "fake_home"
    fake_home.mkdir()

    clean_environ = {
        key: value
        for key, value in os.environ.items()
        if not key.startswith("QUTE_") and key != "QUTESCRIPT_CONFIG_DIR"
    }
    clean_environ["HOME"] = str(fake_home)

    with patch("pathlib.Path.home", return_value=fake_home):
        with patch.dict(os.environ, clean_environ, clear=True):
            yield


@pytest.fixture
def hints_env():
    return EnvironmentSnapshot.capture(
        {
            "QUTE_MODE": "hints",
            "QUTE_URL": "https://example.org/link",
            "QUTE_SELECTED_TEXT": "a link",
            "QUTE_SELECTED_HTML": "<a href='/link'>a link</a>",
        }
    )


@pytest.fixture
def command_env():
    return EnvironmentSnapshot.capture(
        {
            "QUTE_MODE": "command",
            "QUTE_URL": "https://example.org/",
            "QUTE_TITLE": "Example Domain",
            "QUTE_SELECTED_TEXT": "",
            "QUTE_COUNT": "3",
        }
    )

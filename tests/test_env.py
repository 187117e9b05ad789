import os

import pytest

from qutescript import env as qute_env
from qutescript.env import EnvironmentSnapshot
from qutescript.errors import MissingVariableError, UserscriptError


def test_capture_keeps_only_qute_variables():
    snap = EnvironmentSnapshot.capture(
        {"QUTE_URL": "https://example.org", "PATH": "/usr/bin"}
    )
    assert "QUTE_URL" in snap
    assert "PATH" not in snap
    assert snap.get("PATH") is None


def test_capture_defaults_to_process_environment(monkeypatch):
    monkeypatch.setenv("QUTE_USER_AGENT", "Mozilla/5.0")
    snap = EnvironmentSnapshot.capture()
    assert snap.require("QUTE_USER_AGENT") == "Mozilla/5.0"


def test_snapshot_is_not_affected_by_later_environment_changes(monkeypatch):
    monkeypatch.setenv("QUTE_TITLE", "before")
    snap = EnvironmentSnapshot.capture()
    monkeypatch.setenv("QUTE_TITLE", "after")
    monkeypatch.setenv("QUTE_COUNT", "1")

    assert snap.require("QUTE_TITLE") == "before"
    assert "QUTE_COUNT" not in snap


def test_snapshot_mapping_is_read_only():
    snap = EnvironmentSnapshot.capture({"QUTE_URL": "x"})
    with pytest.raises(TypeError):
        snap.variables["QUTE_URL"] = "y"


def test_require_missing_variable_names_it():
    snap = EnvironmentSnapshot.capture({})
    with pytest.raises(MissingVariableError) as exc_info:
        snap.require("QUTE_TITLE")
    assert exc_info.value.variable == "QUTE_TITLE"
    assert "QUTE_TITLE" in str(exc_info.value)
    assert isinstance(exc_info.value, UserscriptError)


def test_empty_value_counts_as_set():
    snap = EnvironmentSnapshot.capture({"QUTE_SELECTED_TEXT": ""})
    assert snap.require("QUTE_SELECTED_TEXT") == ""


def test_snapshot_helper_reuses_given_snapshot():
    snap = EnvironmentSnapshot.capture({"QUTE_URL": "x"})
    assert qute_env.snapshot(snap) is snap


def test_module_require_reads_process_environment_without_snapshot(monkeypatch):
    monkeypatch.setenv("QUTE_FIFO", "/tmp/fifo")
    assert qute_env.require(qute_env.FIFO) == "/tmp/fifo"
    assert "QUTE_FIFO" in os.environ

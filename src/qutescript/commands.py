"""Helpers that send common qutebrowser commands through the FIFO."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from qutescript.fifo import CommandChannel, channel_from_env


class Mode(str, Enum):
    NORMAL = "normal"
    INSERT = "insert"
    CARET = "caret"
    PASSTHROUGH = "passthrough"


def send_command(cmd: str, channel: Optional[CommandChannel] = None) -> None:
    """Send a raw command string; ``QUTE_FIFO`` is used when no channel is given."""
    target = channel if channel is not None else channel_from_env()
    target.send(cmd)


def enter_mode(mode: Mode, channel: Optional[CommandChannel] = None) -> None:
    """Send ``enter-mode {mode}`` to enter the given mode."""
    send_command(f"enter-mode {Mode(mode).value}", channel)


def fake_key(keys: str, channel: Optional[CommandChannel] = None) -> None:
    """Send ``keys`` as raw text input (``fake-key {keys}``), unescaped."""
    send_command(f"fake-key {keys}", channel)

"""Command channel back to qutebrowser.

qutebrowser creates the channel before launching the userscript and
passes its path in ``QUTE_FIFO``. On Unix/macOS it is a named pipe and
commands written to it are executed as soon as qutebrowser reads them,
usually while the userscript is still running. On Windows it is a
regular file and the commands in it are executed once the userscript
terminates. Nothing here waits for, or pretends to wait for, execution.
"""

from __future__ import annotations

import logging
import os
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Iterable, Optional, Union

from qutescript import env as qute_env
from qutescript.env import EnvironmentSnapshot

CHANNEL_ENCODING = "utf-8"
# Never O_CREAT: the channel belongs to qutebrowser.
WRITE_FLAGS = os.O_WRONLY | os.O_APPEND | getattr(os, "O_BINARY", 0)
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandChannel:
    """FIFO file to write commands to.

    Every write opens the path, writes and closes it again; no handle is
    kept between calls.
    """

    path: Path

    @classmethod
    def at(cls, path: Union[str, os.PathLike]) -> "CommandChannel":
        return cls(path=Path(path))

    def open(self) -> BinaryIO:
        """Open the channel for reading and return the raw handle.

        The caller owns the handle. Opening a named pipe blocks until
        a writer is connected.
        """
        return open(self.path, "rb")

    def send(self, text: str) -> None:
        """Write ``text`` to the channel as-is, without adding a newline."""
        payload = text.encode(CHANNEL_ENCODING)
        fd = os.open(self.path, WRITE_FLAGS)
        with os.fdopen(fd, "wb") as handle:
            handle.write(payload)
        logger.debug("sent %d bytes to %s", len(payload), self.path)

    def send_lines(self, commands: Iterable[str]) -> None:
        """Write several commands, newline-terminated, in a single write."""
        lines = [str(command) for command in commands]
        if not lines:
            return
        self.send("\n".join(lines) + "\n")

    def is_pipe(self) -> bool:
        """Return True when the channel is a named pipe (commands run immediately)."""
        try:
            mode = os.stat(self.path).st_mode
        except (FileNotFoundError, NotADirectoryError):
            return False
        return stat.S_ISFIFO(mode)


def channel_from_env(env: Optional[EnvironmentSnapshot] = None) -> CommandChannel:
    """Return the ``CommandChannel`` named by ``QUTE_FIFO``."""
    return CommandChannel.at(qute_env.require(qute_env.FIFO, env))

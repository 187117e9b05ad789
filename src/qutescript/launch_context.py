"""Launch context for a userscript process.

qutebrowser starts a userscript either from a hint selection (``hints``)
or from a command/key binding (``command``). Both modes share some
variables (``QUTE_URL``, ``QUTE_SELECTED_TEXT``) and each has variables
of its own, so the two are kept as separate types: a ``HintsLaunch`` has
no title or count, and a ``CommandLaunch`` has no selected HTML.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from qutescript import env as qute_env
from qutescript.env import EnvironmentSnapshot
from qutescript.errors import InvalidDiscriminatorError

logger = logging.getLogger(__name__)


class LaunchMode(str, Enum):
    HINTS = "hints"
    COMMAND = "command"


@dataclass(frozen=True)
class HintsLaunch:
    """The userscript was started via hints on a selected element."""

    env: EnvironmentSnapshot

    @property
    def mode(self) -> LaunchMode:
        return LaunchMode.HINTS

    def url(self) -> str:
        """Return the URL selected via hints."""
        return self.env.require(qute_env.URL)

    def selected_text(self) -> str:
        """Return the plain text of the element selected via hints."""
        return self.env.require(qute_env.SELECTED_TEXT)

    def selected_html(self) -> str:
        """Return the HTML of the element selected via hints."""
        return self.env.require(qute_env.SELECTED_HTML)


@dataclass(frozen=True)
class CommandLaunch:
    """The userscript was started via a command or key binding."""

    env: EnvironmentSnapshot

    @property
    def mode(self) -> LaunchMode:
        return LaunchMode.COMMAND

    def url(self) -> str:
        """Return the URL of the current page."""
        return self.env.require(qute_env.URL)

    def title(self) -> str:
        """Return the title of the current page."""
        return self.env.require(qute_env.TITLE)

    def selected_text(self) -> str:
        """Return the text currently selected on the page."""
        return self.env.require(qute_env.SELECTED_TEXT)

    def count(self) -> str:
        """Return the ``count`` given to the spawn command, unparsed."""
        return self.env.require(qute_env.COUNT)


LaunchContext = Union[HintsLaunch, CommandLaunch]


def resolve_launch_mode(env: Optional[EnvironmentSnapshot] = None) -> LaunchContext:
    """Return the launch context selected by ``QUTE_MODE``.

    Raises ``MissingVariableError`` when ``QUTE_MODE`` is unset and
    ``InvalidDiscriminatorError`` for any value other than ``hints`` or
    ``command``.
    """
    current = qute_env.snapshot(env)
    raw_mode = current.require(qute_env.MODE)
    if raw_mode == LaunchMode.HINTS.value:
        logger.debug("resolved launch mode=%s", raw_mode)
        return HintsLaunch(env=current)
    if raw_mode == LaunchMode.COMMAND.value:
        logger.debug("resolved launch mode=%s", raw_mode)
        return CommandLaunch(env=current)
    raise InvalidDiscriminatorError(
        qute_env.MODE,
        raw_mode,
        tuple(mode.value for mode in LaunchMode),
    )


def hints_url(env: Optional[EnvironmentSnapshot] = None) -> str:
    """Return the URL selected via hints without resolving the launch mode."""
    return qute_env.require(qute_env.URL, env)


def command_url(env: Optional[EnvironmentSnapshot] = None) -> str:
    """Return the current page URL without resolving the launch mode."""
    return qute_env.require(qute_env.URL, env)

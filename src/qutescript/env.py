"""Environment variables passed by qutebrowser to userscripts.

qutebrowser hands all launch context to a userscript through ``QUTE_*``
variables. ``EnvironmentSnapshot`` copies them once so the rest of the
script works from a fixed, immutable view instead of re-reading
``os.environ`` on every access.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from qutescript.errors import MissingVariableError

VARIABLE_PREFIX = "QUTE_"

MODE = "QUTE_MODE"
URL = "QUTE_URL"
SELECTED_TEXT = "QUTE_SELECTED_TEXT"
SELECTED_HTML = "QUTE_SELECTED_HTML"
TITLE = "QUTE_TITLE"
COUNT = "QUTE_COUNT"
USER_AGENT = "QUTE_USER_AGENT"
HTML = "QUTE_HTML"
TEXT = "QUTE_TEXT"
FIFO = "QUTE_FIFO"
CONFIG_DIR = "QUTE_CONFIG_DIR"
DATA_DIR = "QUTE_DATA_DIR"
DOWNLOAD_DIR = "QUTE_DOWNLOAD_DIR"
COMMANDLINE_TEXT = "QUTE_COMMANDLINE_TEXT"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnvironmentSnapshot:
    """Immutable copy of the ``QUTE_*`` variables taken at one point in time."""

    variables: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def capture(cls, environ: Optional[Mapping[str, str]] = None) -> "EnvironmentSnapshot":
        source = os.environ if environ is None else environ
        captured = {
            str(key): str(value)
            for key, value in source.items()
            if str(key).startswith(VARIABLE_PREFIX)
        }
        logger.debug("captured %d QUTE_* variables", len(captured))
        return cls(variables=MappingProxyType(captured))

    def __contains__(self, name: object) -> bool:
        return name in self.variables

    def get(self, name: str) -> Optional[str]:
        return self.variables.get(name)

    def require(self, name: str) -> str:
        """Return the value of ``name`` or raise ``MissingVariableError``."""
        value = self.variables.get(name)
        if value is None:
            raise MissingVariableError(name)
        return value


def snapshot(env: Optional[EnvironmentSnapshot] = None) -> EnvironmentSnapshot:
    """Return ``env`` unchanged, or capture the current process environment."""
    if env is not None:
        return env
    return EnvironmentSnapshot.capture()


def require(name: str, env: Optional[EnvironmentSnapshot] = None) -> str:
    return snapshot(env).require(name)

"""Environment values available regardless of the launch mode."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from qutescript import env as qute_env
from qutescript.env import EnvironmentSnapshot

PAGE_FILE_ENCODING = "utf-8"


def user_agent(env: Optional[EnvironmentSnapshot] = None) -> str:
    """Return the currently set user agent string."""
    return qute_env.require(qute_env.USER_AGENT, env)


def html_file(env: Optional[EnvironmentSnapshot] = None) -> Path:
    """Return the path of a file containing the HTML source of the current page."""
    return Path(qute_env.require(qute_env.HTML, env))


def text_file(env: Optional[EnvironmentSnapshot] = None) -> Path:
    """Return the path of a file containing the plain text of the current page."""
    return Path(qute_env.require(qute_env.TEXT, env))


def config_dir(env: Optional[EnvironmentSnapshot] = None) -> Path:
    """Return the directory containing qutebrowser's configuration."""
    return Path(qute_env.require(qute_env.CONFIG_DIR, env))


def data_dir(env: Optional[EnvironmentSnapshot] = None) -> Path:
    """Return the directory containing qutebrowser's data."""
    return Path(qute_env.require(qute_env.DATA_DIR, env))


def download_dir(env: Optional[EnvironmentSnapshot] = None) -> Path:
    """Return the downloads directory."""
    return Path(qute_env.require(qute_env.DOWNLOAD_DIR, env))


def commandline_text(env: Optional[EnvironmentSnapshot] = None) -> str:
    """Return the text in qutebrowser's command line."""
    return qute_env.require(qute_env.COMMANDLINE_TEXT, env)


def read_page_html(env: Optional[EnvironmentSnapshot] = None) -> str:
    return html_file(env).read_text(encoding=PAGE_FILE_ENCODING)


def read_page_text(env: Optional[EnvironmentSnapshot] = None) -> str:
    return text_file(env).read_text(encoding=PAGE_FILE_ENCODING)


def _optional_path(value: Optional[str]) -> Optional[Path]:
    if value is None:
        return None
    return Path(value)


@dataclass(frozen=True)
class AuxiliaryContext:
    """Snapshot of the mode-independent values; absent variables are ``None``."""

    user_agent: Optional[str] = None
    html_file: Optional[Path] = None
    text_file: Optional[Path] = None
    config_dir: Optional[Path] = None
    data_dir: Optional[Path] = None
    download_dir: Optional[Path] = None
    commandline_text: Optional[str] = None

    @classmethod
    def from_env(cls, env: Optional[EnvironmentSnapshot] = None) -> "AuxiliaryContext":
        current = qute_env.snapshot(env)
        return cls(
            user_agent=current.get(qute_env.USER_AGENT),
            html_file=_optional_path(current.get(qute_env.HTML)),
            text_file=_optional_path(current.get(qute_env.TEXT)),
            config_dir=_optional_path(current.get(qute_env.CONFIG_DIR)),
            data_dir=_optional_path(current.get(qute_env.DATA_DIR)),
            download_dir=_optional_path(current.get(qute_env.DOWNLOAD_DIR)),
            commandline_text=current.get(qute_env.COMMANDLINE_TEXT),
        )

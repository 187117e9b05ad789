"""Userscript exceptions.

Each error names the thing the host (or the user's setup) failed to
provide, so a userscript can report it without parsing the message.
"""

from __future__ import annotations

from typing import Optional

SPAWN_HINT = "Run the script from qutebrowser with :spawn --userscript or :hint."


class UserscriptError(RuntimeError):
    """Base error for anything a userscript cannot recover from.

    ``variable`` is the environment variable or file at fault, when there
    is one.
    """

    def __init__(
        self, message: str, *, variable: Optional[str] = None, hint: str = ""
    ) -> None:
        self.message = message
        self.variable = variable
        self.hint = hint
        super().__init__(self.user_message)

    @property
    def user_message(self) -> str:
        return " ".join(part for part in (self.message, self.hint) if part)


class MissingVariableError(UserscriptError):
    """Raised when an expected QUTE_* environment variable is not set."""

    def __init__(self, variable: str) -> None:
        super().__init__(
            f"variable {variable} not set.", variable=variable, hint=SPAWN_HINT
        )


class InvalidDiscriminatorError(UserscriptError):
    """Raised when the launch mode variable holds an unrecognized value."""

    def __init__(self, variable: str, value: str, allowed: tuple[str, ...]) -> None:
        self.value = value
        self.allowed = allowed
        expected = ", ".join(repr(item) for item in allowed)
        super().__init__(
            f"invalid {variable} variable {value!r} (expected one of {expected}).",
            variable=variable,
            hint="The qutebrowser version may be incompatible with this script.",
        )


class ConfigError(UserscriptError):
    """Raised when a qutescript configuration file cannot be parsed."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        super().__init__(
            f"Invalid configuration file at {path}: {details}",
            variable=path,
            hint="Fix or remove the file.",
        )

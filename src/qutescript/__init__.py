"""qutescript - helpers for qutebrowser userscripts."""

__version__ = "0.1.0"

__all__ = [
    "AuxiliaryContext",
    "CommandChannel",
    "CommandLaunch",
    "ConfigError",
    "EnvironmentSnapshot",
    "HintsLaunch",
    "InvalidDiscriminatorError",
    "LaunchContext",
    "LaunchMode",
    "MissingVariableError",
    "Mode",
    "UserscriptError",
    "channel_from_env",
    "enter_mode",
    "fake_key",
    "resolve_launch_mode",
    "run",
    "send_command",
    "__version__",
]

_EXPORTS = {
    "AuxiliaryContext": "qutescript.auxiliary",
    "CommandChannel": "qutescript.fifo",
    "channel_from_env": "qutescript.fifo",
    "CommandLaunch": "qutescript.launch_context",
    "HintsLaunch": "qutescript.launch_context",
    "LaunchContext": "qutescript.launch_context",
    "LaunchMode": "qutescript.launch_context",
    "resolve_launch_mode": "qutescript.launch_context",
    "EnvironmentSnapshot": "qutescript.env",
    "ConfigError": "qutescript.errors",
    "InvalidDiscriminatorError": "qutescript.errors",
    "MissingVariableError": "qutescript.errors",
    "UserscriptError": "qutescript.errors",
    "Mode": "qutescript.commands",
    "enter_mode": "qutescript.commands",
    "fake_key": "qutescript.commands",
    "send_command": "qutescript.commands",
    "run": "qutescript.runner",
}


def __getattr__(name: str):
    if name in _EXPORTS:
        import importlib

        module = importlib.import_module(_EXPORTS[name])
        return getattr(module, name)
    raise AttributeError(f"module 'qutescript' has no attribute {name!r}")

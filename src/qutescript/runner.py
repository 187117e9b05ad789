"""Entry point that turns userscript failures into a diagnostic and exit status.

The library itself only raises. Scripts that prefer to abort on a missing
or malformed environment wrap their ``main`` with ``run``.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, TypeVar

from rich.console import Console
from rich.markup import escape

from qutescript.errors import UserscriptError

EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130
logger = logging.getLogger(__name__)

T = TypeVar("T")


def _configure_logging() -> None:
    from qutescript.config import LOG_FILE, LOG_LEVEL
    from qutescript.logger import setup_logging

    setup_logging(LOG_LEVEL, LOG_FILE)


def run(main: Callable[[], T], *, console: Optional[Console] = None) -> T:
    """Call ``main`` and exit with a diagnostic if the environment or FIFO fails."""
    error_console = console or Console(stderr=True)
    try:
        _configure_logging()
        return main()
    except UserscriptError as exc:
        logger.error("userscript failed: %s", exc.user_message)
        error_console.print(f"[bold red]Error:[/] {escape(exc.user_message)}", highlight=False)
        raise SystemExit(EXIT_FAILURE)
    except OSError as exc:
        logger.exception("userscript I/O failure")
        error_console.print(f"[bold red]Error:[/] {escape(str(exc))}", highlight=False)
        raise SystemExit(EXIT_FAILURE)
    except KeyboardInterrupt:
        logger.info("userscript interrupted")
        raise SystemExit(EXIT_INTERRUPTED)

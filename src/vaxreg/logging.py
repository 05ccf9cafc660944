"""Logging setup for VAXREG.

VAXREG emits through module loggers under the `vaxreg` namespace and does
nothing at import time. `configure_logging()` attaches handlers to that
namespace only, so an embedding application's root configuration is left
alone:

- a Rich console handler on stderr, tagging each line with the thread name
  (bookings race across threads, so that is usually the first question);
- optionally, a "flight recorder": a memory buffer of DEBUG records that is
  written to a file when a WARNING or worse arrives.

`bootstrap()` calls it when `VAXREG_LOG_LEVEL` is set.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

    from vaxreg.config import Settings

PROJECT_LOGGER = "vaxreg"

_CONSOLE_FORMAT = "[%(threadName)s] %(message)s"
_RECORDER_FORMAT = (
    "[%(asctime)s] [%(threadName)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"
)


def configure_logging(
    level: int | str = logging.WARNING,
    *,
    color: bool = True,
    flight_recorder_path: Path | None = None,
    flight_capacity: int = 2000,
) -> list[logging.Handler]:
    """Attach VAXREG's handlers to the `vaxreg` logger.

    Calling it again replaces the handlers installed by the previous call.
    Records stop propagating to the root logger while these handlers are in
    place.

    Args:
        level: Console level, as a number or a name such as "info".
        color: Enable color output when True.
        flight_recorder_path: Enables the flight recorder writing to this path.
            The file is only created on the first flush.
        flight_capacity: Number of records the flight recorder buffers.

    Returns:
        The handlers now attached to the `vaxreg` logger.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    console = Console(color_system="auto" if color else None, stderr=True)
    console_handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=level <= logging.DEBUG,
    )
    console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    handlers: list[logging.Handler] = [console_handler]

    if flight_recorder_path is not None:
        target = logging.FileHandler(
            flight_recorder_path, mode="w", encoding="utf-8", delay=True
        )
        target.setFormatter(logging.Formatter(_RECORDER_FORMAT))
        handlers.append(
            MemoryHandler(
                capacity=flight_capacity,
                flushLevel=logging.WARNING,
                target=target,
                flushOnClose=False,
            )
        )

    project_logger = logging.getLogger(PROJECT_LOGGER)
    for old in project_logger.handlers[:]:
        project_logger.removeHandler(old)
        old.close()
    for handler in handlers:
        project_logger.addHandler(handler)
    # the recorder wants everything; the console filters by its own level
    project_logger.setLevel(logging.DEBUG if flight_recorder_path else level)
    project_logger.propagate = False
    return handlers


def log_startup(
    logger: Logger,
    *,
    app_version: str,
    settings: Settings,
    handlers: list[logging.Handler],
) -> None:
    """Log a human-friendly startup line plus DEBUG diagnostics.

    Args:
        logger: Logger used to emit startup messages.
        app_version: Application version string to display.
        settings: The settings the registry was built with.
        handlers: Handlers currently attached to the `vaxreg` logger.
    """

    logger.info(
        "VAXREG %s: negative-updates=%s, ids=%s",
        app_version,
        settings.negative_updates.value,
        settings.id_strategy,
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])

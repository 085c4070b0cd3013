"""Logging for template resolution.

Cumulus reports what it resolves (which template, which provider class,
which options ended up set) through loguru under the ``cumulus`` name.
Nothing is emitted until ``setup_logging`` is called, so importing the
package never writes to an application's stderr.

Example:
    from cumulus import resolve_template_options
    from cumulus.logging import LogConfig, setup_logging, teardown_logging

    handler_ids = setup_logging(LogConfig(level="DEBUG", file="cumulus.log"))
    try:
        options = resolve_template_options("web")
    finally:
        teardown_logging(handler_ids)

Option reprs mask key material as ``<set>``, so a DEBUG log of a resolved
template is safe to keep.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Literal

from loguru import logger

logger.disable("cumulus")

type LogLevel = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"]

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> "
    "<level>{level: <7}</level> "
    "<cyan>{name}</cyan> | "
    "<level>{message}</level>"
)

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} {level: <7} {name}:{function}:{line} | {message}"


@dataclass(frozen=True, slots=True)
class LogConfig:
    """Where cumulus log records go.

    Attributes:
        level: Minimum level written to stderr.
        file: Log file path; the file receives every record from DEBUG up.
        console: Whether to write to stderr.
        rotation: Size or age after which the log file is rotated.
        retention: Number of rotated files kept.
    """

    level: LogLevel = "INFO"
    file: str | None = None
    console: bool = True
    rotation: str = "50 MB"
    retention: int = 10


def _add_console(config: LogConfig) -> int:
    return logger.add(
        sys.stderr,
        level=config.level,
        format=CONSOLE_FORMAT,
        colorize=True,
        filter="cumulus",
    )


def _add_file(config: LogConfig, path: str) -> int:
    return logger.add(
        path,
        level="DEBUG",
        format=FILE_FORMAT,
        rotation=config.rotation,
        retention=config.retention,
        compression="zip",
        diagnose=False,  # tracebacks would otherwise render key arguments
        filter="cumulus",
    )


def setup_logging(config: LogConfig) -> list[int]:
    """Route cumulus records to the configured sinks; return their handler ids."""
    logger.enable("cumulus")
    handler_ids: list[int] = []
    if config.console:
        handler_ids.append(_add_console(config))
    if config.file:
        handler_ids.append(_add_file(config, config.file))
    return handler_ids


def teardown_logging(handler_ids: list[int]) -> None:
    """Drop the handlers from ``setup_logging`` and silence cumulus again."""
    for hid in handler_ids:
        logger.remove(hid)
    logger.disable("cumulus")

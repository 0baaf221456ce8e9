"""Logging configuration models for the envtree package."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field


class LoggingConfig(BaseModel):
    """Configuration for logging.

    Parameters
    ----------
    level : str
        Log level.
    format : str
        Log format string.
    file : Path | None
        Log file path.
    console : bool
        Whether to log to console.

    Examples
    --------
    >>> config = LoggingConfig()
    >>> config.level
    'INFO'
    >>> config.console
    True
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level"
    )
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )
    file: Path | None = Field(default=None, description="Log file path")
    console: bool = Field(default=True, description="Log to console")


def configure_logging(
    config: LoggingConfig, logger_name: str = "envtree"
) -> logging.Logger:
    """Install handlers described by ``config`` on the package logger.

    Handlers previously installed by this function are replaced, so calling
    it twice does not duplicate output.

    Parameters
    ----------
    config : LoggingConfig
        Logging configuration.
    logger_name : str
        Name of the logger to configure.

    Returns
    -------
    logging.Logger
        The configured logger.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(config.level)

    for handler in list(logger.handlers):
        if getattr(handler, "_envtree_handler", False):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(config.format)
    handlers: list[logging.Handler] = []
    if config.console:
        handlers.append(logging.StreamHandler(sys.stderr))
    if config.file is not None:
        handlers.append(logging.FileHandler(config.file, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler._envtree_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger

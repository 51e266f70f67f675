"""
Logging setup for satlab.

Library modules only create ``logging.getLogger(__name__)`` loggers; handlers
are attached here, by applications and the command-line interface.
"""

import logging
from typing import Optional, Union

from satlab.config import SatLabConfig

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

VERBOSITY_LEVELS = {0: logging.WARNING, 1: logging.INFO, 2: logging.DEBUG}


def setup_logging(
    level: Union[int, str] = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure the ``satlab`` package logger.

    Args:
        level: Logging level, as a number or a name such as ``"DEBUG"``
        fmt: Format string for log records
        log_file: Also write records to this file when given

    Returns:
        The configured package logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level: {level}")

    logger = logging.getLogger("satlab")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(fmt)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def setup_logging_from_config(config: SatLabConfig, verbosity: Optional[int] = None) -> logging.Logger:
    """
    Configure logging from the ``logging`` section of a configuration.

    Args:
        config: Configuration to read level, format and file from
        verbosity: Command-line ``-v`` count; overrides the configured level when given
    """
    level = config.get("logging.level", "INFO")
    if verbosity is not None:
        level = VERBOSITY_LEVELS.get(verbosity, logging.DEBUG)

    return setup_logging(
        level=level,
        fmt=config.get("logging.format", DEFAULT_FORMAT),
        log_file=config.get("logging.file"),
    )

"""Logging configuration for seidl"""

import logging
import sys
import time


class MillisecondFormatter(logging.Formatter):
    """Custom formatter that includes milliseconds in timestamps"""

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        """Format time with milliseconds"""
        ct = self.converter(record.created)
        if datefmt:
            s = time.strftime(datefmt.replace('.%f', ''), ct)
            return f"{s}.{int(record.msecs):03d}"
        else:
            t = time.strftime("%Y-%m-%d %H:%M:%S", ct)
            return f"{t}.{int(record.msecs):03d}"


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
) -> logging.Logger:
    """
    Set up logging configuration

    Diagnostics meant for the user (errors, "no images found") are printed
    by the command layer. The logger only carries developer detail, so the
    console handler is quiet unless a lower level is requested.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger("seidl")
    logger.setLevel(getattr(logging, level.upper()))

    # Remove existing handlers
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, level.upper()))
    console_formatter = logging.Formatter(
        fmt="%(levelname)s: %(message)s"
    )
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_formatter = MillisecondFormatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s:%(lineno)d - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)
        # The file gets everything, the console stays at the requested level
        logger.setLevel(logging.DEBUG)

    # Don't propagate to root logger
    logger.propagate = False

    return logger


def get_logger(name: str = "seidl") -> logging.Logger:
    """
    Get a logger instance

    Args:
        name: Logger name (defaults to main app logger)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def enable_debug() -> None:
    """Enable DEBUG level logging"""
    logger = get_logger()
    logger.setLevel(logging.DEBUG)
    for handler in logger.handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
            handler.setLevel(logging.DEBUG)

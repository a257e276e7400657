"""Base utilities for CLI commands"""

import logging
import sys
import traceback
from typing import Optional

from seidl.config.settings import Settings
from seidl.services.cloudinfo_client import CloudInfoClient

logger = logging.getLogger("seidl")


def status(message: str, quiet: bool = False) -> None:
    """Print status message to stderr unless quiet mode is on.

    Args:
        message: Status message to display
        quiet: Whether to suppress the message
    """
    if not quiet:
        print(message, file=sys.stderr)


def print_error(message: str, debug: bool = False, exception: Optional[Exception] = None) -> None:
    """Print error message to stderr with consistent formatting.

    Args:
        message: Error message to display
        debug: Whether to print full traceback
        exception: Optional exception for traceback
    """
    print(f"error: {message}", file=sys.stderr)
    if debug and exception:
        traceback.print_exception(type(exception), exception, exception.__traceback__)


def write_output(output: str) -> None:
    """Write a block of output to stdout, skipping empty blocks."""
    if output:
        print(output)


def get_client(settings: Settings) -> CloudInfoClient:
    """Get a public cloud info client configured from settings"""
    logger.debug(f"Using public cloud info service at {settings.api_url}")
    return CloudInfoClient(
        settings.api_url,
        timeout=settings.http_timeout,
        user_agent=settings.user_agent,
    )

"""CLI command handlers

This package organizes CLI commands into logical modules:
- image_commands: Provider image queries
- info_commands: Usage, version, region and environment listings
"""

import logging
from typing import List, Optional

from seidl.cli.interpreter import (
    ListEnvironmentsStep,
    ListRegionsStep,
    QueryStep,
    UsageStep,
    VersionStep,
    interpret,
    validate_arguments,
)
from seidl.config.settings import Settings
from seidl.exceptions import NoImagesFoundError, SeidlError
from seidl.services.image_service import ImageService

from .image_commands import (
    ProviderResult,
    cmd_query,
    query_images,
    render_result,
)
from .info_commands import (
    cmd_list_environments,
    cmd_list_regions,
    cmd_usage,
    cmd_version,
    usage_text,
    version_text,
)
from .base import (
    get_client,
    print_error,
    status,
    write_output,
)

logger = logging.getLogger("seidl")

STEP_HANDLERS = {
    UsageStep: cmd_usage,
    VersionStep: cmd_version,
    ListEnvironmentsStep: cmd_list_environments,
    ListRegionsStep: cmd_list_regions,
    QueryStep: cmd_query,
}

DANGLING_HINT = "Program arguments need to be BEFORE the CSP."


def run_steps(argv: List[str], service: ImageService) -> None:
    """Execute the steps of an argument list in order.

    Raises:
        SeidlError: From the first failing step
    """
    for step in interpret(argv):
        logger.debug(f"Executing {step}")
        STEP_HANDLERS[type(step)](step, service)


def run_cli(argv: List[str], settings: Optional[Settings] = None) -> int:
    """Run the command line and return the exit code"""
    if not argv:
        print(usage_text())
        return 1

    dangling = validate_arguments(argv)
    if dangling is not None:
        status(f"{dangling}\n{DANGLING_HINT}")
        return 1

    settings = settings or Settings()
    with get_client(settings) as client:
        try:
            run_steps(argv, ImageService(client))
        except NoImagesFoundError as e:
            status(str(e))
            return 1
        except SeidlError as e:
            print_error(str(e), debug=settings.debug, exception=e)
            return 1
    return 0


__all__ = [
    # Image commands
    'ProviderResult',
    'cmd_query',
    'query_images',
    'render_result',
    # Info commands
    'cmd_list_environments',
    'cmd_list_regions',
    'cmd_usage',
    'cmd_version',
    'usage_text',
    'version_text',
    # Base utilities
    'get_client',
    'print_error',
    'status',
    'write_output',
    # Runner
    'run_cli',
    'run_steps',
]

"""Usage, version and listing commands"""

import sys

from seidl import __version__
from seidl.cli.interpreter import Step
from seidl.cli.output import TableFormatter
from seidl.services.image_service import ImageService

from .base import write_output

PROJECT_URL = "https://github.com/grisu48/seidl/"


def usage_text(program: str = "seidl") -> str:
    """Build the usage message"""
    return "\n".join([
        f"Usage: {program} [OPTIONS] CSP...",
        "CSP (cloud service providers)   gce|aws|azure",
        "OPTIONS:",
        "  -f, --filter FILTER           Filter results based on the given strings (comma-separated)",
        "  -r, --region REGION           Set region (AWS only)",
        "  --list-aws-regions            List AWS regions",
        "  --az-env ENV                  Set environment (for Azure)",
        "  --list-az-envs                List possible Azure environments",
        "  --version                     Show program version",
        "  -h, --help                    Show this help",
        "",
        "Arguments are processed sequentially and a query is executed once a CSP string is identified.",
        "Consequently an argument following a CSP won't be considered in that query.",
        f"  right:  {program} -f 'sles,15-sp2' gce",
        f"  wrong:  {program} gce -f 'sles,15-sp2'",
        "",
    ])


def version_text() -> str:
    return f"seidl v{__version__} -- {PROJECT_URL}"


def cmd_usage(step: Step, service: ImageService) -> None:
    """Print usage"""
    print(usage_text())


def cmd_version(step: Step, service: ImageService) -> None:
    """Print program version"""
    print(version_text())


def cmd_list_environments(step: Step, service: ImageService) -> None:
    """List Azure environments"""
    formatter = TableFormatter()
    environments = service.get_azure_environments()
    write_output(formatter.format_names(env.name for env in environments))


def cmd_list_regions(step: Step, service: ImageService) -> None:
    """List AWS regions known to the public cloud info service"""
    formatter = TableFormatter()
    regions = service.get_aws_regions()
    if not regions:
        print("no regions found", file=sys.stderr)
    write_output(formatter.format_names(region.name for region in regions))

"""Command line interpretation

Arguments are processed sequentially: configuration flags update the
current Configuration and every CSP token triggers a query with the
configuration collected so far. A flag therefore only affects the CSPs
that follow it.

Two independent passes run over the same argument list:

- validate_arguments() is a pre-scan that rejects configuration flags not
  followed by a CSP, before anything is executed.
- interpret() lazily yields the steps to execute, in order.
"""

from dataclasses import dataclass, replace
from typing import Iterator, List, Optional, Tuple

from seidl.exceptions import DanglingArgumentError, UnknownArgumentError, UsageError
from seidl.models.provider import Provider, is_provider, resolve_provider

HELP_FLAGS = ("-h", "--help")
VERSION_FLAG = "--version"
FILTER_FLAGS = ("-f", "--filter")
REGION_FLAGS = ("-r", "--region")
ENVIRONMENT_FLAG = "--az-env"
LIST_ENVIRONMENTS_FLAG = "--list-az-envs"
LIST_REGIONS_FLAG = "--list-aws-regions"

# Flags that consume the following argument as their value
VALUE_FLAGS = FILTER_FLAGS + REGION_FLAGS + (ENVIRONMENT_FLAG,)


@dataclass(frozen=True)
class Configuration:
    """Query configuration accumulated while scanning arguments.

    Attributes:
        filter: Comma-separated name filter
        region: Region name (Amazon only)
        environment: Azure environment, accepted but not used by queries
    """
    filter: str = ""
    region: str = ""
    environment: str = ""


class Step:
    """A unit of work produced by interpret()"""


@dataclass(frozen=True)
class UsageStep(Step):
    pass


@dataclass(frozen=True)
class VersionStep(Step):
    pass


@dataclass(frozen=True)
class ListEnvironmentsStep(Step):
    pass


@dataclass(frozen=True)
class ListRegionsStep(Step):
    pass


@dataclass(frozen=True)
class QueryStep(Step):
    """Query a provider with a snapshot of the configuration"""
    provider: Provider
    configuration: Configuration


def validate_arguments(argv: List[str]) -> Optional[DanglingArgumentError]:
    """Check that every configuration flag is anchored by a later CSP.

    A value flag marks itself as pending and skips its value. A CSP token
    clears the pending flag. Any other plain token seen while a flag is
    pending means the flag is not followed by a CSP.

    Args:
        argv: Program arguments without the program name

    Returns:
        DanglingArgumentError for the offending flag, or None if valid
    """
    pending = None
    i = 0
    while i < len(argv):
        arg = argv[i]
        i += 1
        if not arg:
            continue
        if arg in VALUE_FLAGS:
            pending = arg
            i += 1
        elif is_provider(arg):
            pending = None
        elif pending is not None and not arg.startswith("-"):
            return DanglingArgumentError(pending)
    if pending is not None:
        return DanglingArgumentError(pending)
    return None


def _take_value(argv: List[str], i: int, flag: str) -> Tuple[str, int]:
    """Return the value following a flag and the next index."""
    if i >= len(argv):
        raise UsageError(f"missing value for {flag}")
    return argv[i], i + 1


def interpret(argv: List[str]) -> Iterator[Step]:
    """Walk the arguments and yield the steps to execute.

    The walk stops after a help or version step. Invalid tokens raise when
    they are reached, so steps yielded before them have already run.

    Args:
        argv: Program arguments without the program name

    Yields:
        Step instances in argument order

    Raises:
        UnknownArgumentError: For unknown flags or CSP names
        UsageError: If a value flag is the last argument
    """
    configuration = Configuration()
    i = 0
    while i < len(argv):
        arg = argv[i]
        i += 1
        if not arg:
            continue

        if arg.startswith("-"):
            if arg in HELP_FLAGS:
                yield UsageStep()
                return
            elif arg == VERSION_FLAG:
                yield VersionStep()
                return
            elif arg in FILTER_FLAGS:
                value, i = _take_value(argv, i, arg)
                configuration = replace(configuration, filter=value)
            elif arg in REGION_FLAGS:
                value, i = _take_value(argv, i, arg)
                configuration = replace(configuration, region=value)
            elif arg == ENVIRONMENT_FLAG:
                value, i = _take_value(argv, i, arg)
                configuration = replace(configuration, environment=value)
            elif arg == LIST_ENVIRONMENTS_FLAG:
                yield ListEnvironmentsStep()
            elif arg == LIST_REGIONS_FLAG:
                yield ListRegionsStep()
            else:
                raise UnknownArgumentError(f"invalid parameter: {arg}")
        else:
            provider = resolve_provider(arg)
            if provider is None:
                raise UnknownArgumentError(f"invalid CSP: {arg}")
            yield QueryStep(provider=provider, configuration=configuration)

"""Entry point for the application"""

import sys
from typing import List, Optional

from pydantic import ValidationError

from seidl.cli.commands import run_cli
from seidl.config.settings import Settings
from seidl.exceptions import ConfigurationError
from seidl.logging_config import enable_debug, setup_logging


def load_settings() -> Settings:
    """Load settings, turning validation failures into ConfigurationError"""
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"invalid configuration: {e}") from e


def main(argv: Optional[List[str]] = None):
    """Main entry point"""
    if argv is None:
        argv = sys.argv[1:]

    try:
        settings = load_settings()
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        setup_logging(level=settings.log_level, log_file=settings.log_file)
    except OSError as e:
        print(f"error: cannot open log file {settings.log_file}: {e}", file=sys.stderr)
        sys.exit(1)
    if settings.debug:
        enable_debug()

    try:
        exit_code = run_cli(argv, settings)
    except KeyboardInterrupt:
        exit_code = 1
    sys.exit(exit_code)


if __name__ == "__main__":
    main()

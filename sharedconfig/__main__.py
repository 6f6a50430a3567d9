#!/usr/bin/env python3
import logging
import sys
from typing import Any, List, Optional

import click

from sharedconfig import __version__
from sharedconfig.cmd.profiles import profiles_group
from sharedconfig.core.errors import ExitCode


LOG_FORMAT = (
    "%(asctime)s %(levelname)s %(process)x:%(thread)x "
    "%(name)s:%(funcName)s:%(lineno)d %(message)s"
)


def setup_debug_logs(debug: bool) -> None:
    """Configure logging; debug logs go to stderr."""
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(stream=sys.stderr, level=level, format=LOG_FORMAT)


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    commands={"profiles": profiles_group},
)
@click.option("--debug", is_flag=True, default=False, help="Show debug logs.")
@click.version_option(version=__version__)
def cli(debug: bool, **kwargs: Any) -> None:
    """Inspect and validate AWS shared config and credentials files."""
    setup_debug_logs(debug)


@cli.result_callback()
def before_exit(exit_code: Optional[int], **kwargs: Any) -> None:
    """Turn the value returned by the command into the process exit code."""
    sys.exit(ExitCode.SUCCESS if exit_code is None else exit_code)


def main(args: Optional[List[str]] = None) -> Any:
    return cli.main(args=args, prog_name="sharedconfig")


if __name__ == "__main__":
    sys.exit(main())

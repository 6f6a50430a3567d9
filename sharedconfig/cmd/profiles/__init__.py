"""
Profiles command group for inspecting shared config and credentials files.
"""

from typing import Any

import click

from sharedconfig.cmd.profiles.check import check_cmd
from sharedconfig.cmd.profiles.show import show_cmd


@click.group(
    commands={
        "show": show_cmd,
        "check": check_cmd,
    },
)
def profiles_group(**kwargs: Any) -> None:
    """
    Commands for reading AWS shared config and credentials files.

    \b
    Commands:
      show   - Print the merged profiles (secrets masked)
      check  - Report malformed profiles and lines
    """

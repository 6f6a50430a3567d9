"""
Profiles check command - reports malformed content in shared files.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click

from sharedconfig.cmd.profiles.common_options import (
    json_option,
    load_reports,
    profile_file_options,
)
from sharedconfig.core import ui
from sharedconfig.core.errors import ExitCode, ProfileParseError
from sharedconfig.verticals.profile.output import display_check_results


@click.command()
@profile_file_options
@json_option
def check_cmd(
    config_file: Path | None,
    credentials_file: Path | None,
    strict: bool,
    json_output: bool,
    **kwargs: Any,
) -> int:
    """
    Check shared config and credentials files for malformed content.

    Reports invalid profile headers, invalid property names and lines that
    match no known syntax. Exits with 1 when problems are found.

    \b
    Examples:
      sharedconfig profiles check --config-file ~/.aws/config
      sharedconfig profiles check --credentials-file ~/.aws/credentials --json
    """
    try:
        reports = load_reports(config_file, credentials_file, strict)
    except (OSError, ProfileParseError) as e:
        ui.display_error(f"Error: {e}")
        return ExitCode.UNEXPECTED_ERROR

    problems = display_check_results(reports, json_output=json_output)
    return ExitCode.PARSE_ERROR if problems else ExitCode.SUCCESS

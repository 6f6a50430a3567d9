"""
Profiles show command - prints the profiles defined by shared files.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

import click

from sharedconfig.cmd.profiles.common_options import (
    json_option,
    load_reports,
    profile_file_options,
)
from sharedconfig.core import ui
from sharedconfig.core.errors import ExitCode, ProfileParseError
from sharedconfig.verticals.profile import FileType
from sharedconfig.verticals.profile.assembler import ProfileMap
from sharedconfig.verticals.profile.merge import merge_profile_maps
from sharedconfig.verticals.profile.output import display_profiles


logger = logging.getLogger(__name__)


@click.command()
@profile_file_options
@json_option
@click.option(
    "--profile",
    "profile_name",
    type=str,
    default=None,
    help="Only show this profile.",
)
@click.option(
    "--show-secrets",
    is_flag=True,
    default=False,
    help="Print secret access keys and session tokens in full.",
)
def show_cmd(
    config_file: Path | None,
    credentials_file: Path | None,
    strict: bool,
    json_output: bool,
    profile_name: str | None,
    show_secrets: bool,
    **kwargs: Any,
) -> int:
    """
    Show the profiles defined in shared config and credentials files.

    When both files are given, properties from the credentials file take
    precedence over the config file for profiles defined in both.

    \b
    Examples:
      sharedconfig profiles show --config-file ~/.aws/config
      sharedconfig profiles show --credentials-file ~/.aws/credentials
      sharedconfig profiles show --config-file config --profile dev --json
    """
    try:
        reports = load_reports(config_file, credentials_file, strict)
    except (OSError, ProfileParseError) as e:
        ui.display_error(f"Error: {e}")
        return ExitCode.UNEXPECTED_ERROR

    by_type: Dict[FileType, ProfileMap] = {
        report.file_type: report.result.profiles for report in reports
    }
    profiles = merge_profile_maps(
        by_type.get(FileType.CONFIGURATION, {}),
        by_type.get(FileType.CREDENTIALS, {}),
    )

    if profile_name is not None:
        if profile_name not in profiles:
            ui.display_error(f"Profile '{profile_name}' not found.")
            return ExitCode.USAGE_ERROR
        profiles = {profile_name: profiles[profile_name]}

    logger.debug("Showing %d profile(s)", len(profiles))
    display_profiles(
        profiles, reports, json_output=json_output, show_secrets=show_secrets
    )
    return ExitCode.SUCCESS

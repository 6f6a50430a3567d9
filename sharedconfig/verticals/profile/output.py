"""
Output formatting for parsed profiles and parse diagnostics.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, List

import click

from sharedconfig.core import ui
from sharedconfig.core.text_utils import pluralize
from sharedconfig.verticals.profile import FileType
from sharedconfig.verticals.profile.assembler import ParseResult, Profile, ProfileMap


# Property keys whose values are never printed in full
SECRET_KEYS = {
    "aws_secret_access_key",
    "aws_session_token",
}

MASK_VISIBLE_CHARS = 4


@dataclass
class FileReport:
    """The parse result of one file, with where it came from."""

    path: str
    file_type: FileType
    result: ParseResult


def mask_value(key: str, value: str, show_secrets: bool = False) -> str:
    """Hide all but the last characters of secret values."""
    if show_secrets or key not in SECRET_KEYS or not value:
        return value
    if len(value) <= MASK_VISIBLE_CHARS:
        return "*" * len(value)
    return "*" * 8 + value[-MASK_VISIBLE_CHARS:]


def _profile_to_dict(profile: Profile, show_secrets: bool) -> Dict[str, Any]:
    data: Dict[str, Any] = {}
    for key, prop in profile.properties.items():
        if prop.sub_properties:
            data[key] = {
                sub_key: mask_value(sub_key, sub_value, show_secrets)
                for sub_key, sub_value in prop.sub_properties.items()
            }
        else:
            data[key] = mask_value(key, prop.value, show_secrets)
    return data


def _diagnostics_to_list(reports: List[FileReport]) -> List[Dict[str, Any]]:
    return [
        {
            "path": report.path,
            "line": diagnostic.line_number + 1,
            "kind": diagnostic.kind.value,
            "message": diagnostic.message,
        }
        for report in reports
        for diagnostic in report.result.diagnostics
    ]


def display_diagnostics(reports: List[FileReport]) -> None:
    """Display diagnostics of every file as `path:line: message` warnings."""
    for report in reports:
        for diagnostic in report.result.diagnostics:
            ui.display_warning(
                f"{report.path}:{diagnostic.line_number + 1}: {diagnostic.message}"
            )


def _display_text_profiles(profiles: ProfileMap, show_secrets: bool) -> None:
    total = len(profiles)
    ui.display_heading(f"Found {total} {pluralize('profile', total)}")
    for name, profile in profiles.items():
        ui.display_info("")
        ui.display_info(f"[{name}]")
        for key, value in _profile_to_dict(profile, show_secrets).items():
            if isinstance(value, dict):
                ui.display_info(f"  {key} =")
                for sub_key, sub_value in value.items():
                    ui.display_info(f"    {sub_key} = {sub_value}")
            else:
                ui.display_info(f"  {key} = {value}")


def display_profiles(
    profiles: ProfileMap,
    reports: List[FileReport],
    json_output: bool = False,
    show_secrets: bool = False,
) -> None:
    """Display profiles and the diagnostics of the files they came from."""
    if json_output:
        data = {
            "profiles": {
                name: _profile_to_dict(profile, show_secrets)
                for name, profile in profiles.items()
            },
            "diagnostics": _diagnostics_to_list(reports),
        }
        click.echo(json.dumps(data, indent=2))
        return

    display_diagnostics(reports)
    _display_text_profiles(profiles, show_secrets)


def display_check_results(
    reports: List[FileReport], json_output: bool = False
) -> int:
    """
    Display the outcome of checking files.

    Returns:
        Number of diagnostics found
    """
    count = sum(len(report.result.diagnostics) for report in reports)
    if json_output:
        data = {
            "files": [
                {
                    "path": report.path,
                    "file_type": report.file_type.name.lower(),
                    "profiles": len(report.result.profiles),
                }
                for report in reports
            ],
            "diagnostics": _diagnostics_to_list(reports),
        }
        click.echo(json.dumps(data, indent=2))
        return count

    display_diagnostics(reports)
    for report in reports:
        profiles = len(report.result.profiles)
        ui.display_info(
            f"{report.path}: {profiles} valid {pluralize('profile', profiles)}"
        )
    if count:
        ui.display_warning(f"Found {count} {pluralize('problem', count)}.")
    else:
        ui.display_heading("No problems found.")
    return count

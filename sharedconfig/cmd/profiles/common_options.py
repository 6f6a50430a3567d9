"""
Common options for profiles commands.
"""

from functools import wraps
from pathlib import Path
from typing import Any, Callable, List, Optional, TypeVar

import click

from sharedconfig.verticals.profile import FileType
from sharedconfig.verticals.profile.loader import load_profile_file
from sharedconfig.verticals.profile.output import FileReport
from sharedconfig.verticals.profile.tokenizer import ParseOptions


F = TypeVar("F", bound=Callable[..., Any])


def profile_file_options(f: F) -> F:
    """Options selecting which files to parse and how strictly."""

    @click.option(
        "--config-file",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Path to a shared config file (e.g. ~/.aws/config).",
    )
    @click.option(
        "--credentials-file",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Path to a shared credentials file (e.g. ~/.aws/credentials).",
    )
    @click.option(
        "--strict",
        is_flag=True,
        default=False,
        help="Fail on the first malformed line instead of skipping it.",
    )
    @wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return f(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def json_option(f: F) -> F:
    """Option for JSON output."""

    @click.option(
        "--json",
        "json_output",
        is_flag=True,
        default=False,
        help="Use JSON output.",
    )
    @wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return f(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def load_reports(
    config_file: Optional[Path],
    credentials_file: Optional[Path],
    strict: bool,
) -> List[FileReport]:
    """
    Parse the requested files, config file first.

    Raises:
        click.UsageError: If no file was given.
        OSError: If a file cannot be read.
        ProfileParseError: In strict mode, on a structural error.
    """
    if config_file is None and credentials_file is None:
        raise click.UsageError(
            "Provide at least one of --config-file or --credentials-file."
        )

    options = ParseOptions(strict=strict)
    reports = []
    for path, file_type in (
        (config_file, FileType.CONFIGURATION),
        (credentials_file, FileType.CREDENTIALS),
    ):
        if path is None:
            continue
        result = load_profile_file(path, file_type, options)
        reports.append(FileReport(path=str(path), file_type=file_type, result=result))
    return reports

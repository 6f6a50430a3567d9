"""
Exit codes and exceptions shared by sharedconfig commands and libraries.
"""

from enum import IntEnum
from typing import Optional


class ExitCode(IntEnum):
    """
    Exit codes returned by sharedconfig commands.
    """

    SUCCESS = 0
    # Parsing succeeded but reported malformed lines or profiles
    PARSE_ERROR = 1
    USAGE_ERROR = 2
    UNEXPECTED_ERROR = 128


class SharedConfigError(Exception):
    """Base class for errors raised by sharedconfig."""

    pass


class ProfileParseError(SharedConfigError):
    """Raised in strict mode when a line matches no grammar rule."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            # Line numbers are 0-based internally, humans count from 1
            message = f"{message} (line {line_number + 1})"
        super().__init__(message)


class CredentialsNotFoundError(SharedConfigError):
    """Raised when a profile does not hold the requested credentials."""

    pass

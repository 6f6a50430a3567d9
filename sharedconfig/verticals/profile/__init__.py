"""
Token and line definitions for shared config/credentials file parsing.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Union


class FileType(Enum):
    """Kinds of shared files, each with its own profile header grammar."""

    CONFIGURATION = auto()
    CREDENTIALS = auto()


@dataclass(frozen=True)
class FileLine:
    """A single physical line of a shared file."""

    line_number: int  # 0-based position in the source file
    content: str  # Raw, untrimmed text


@dataclass(frozen=True)
class ProfileToken:
    """A profile header such as ``[default]`` or ``[profile dev]``."""

    is_default: bool
    name: str
    is_valid: bool
    # True for the keyworded form `[profile name]`
    has_profile_prefix: bool = False
    line_number: int = field(default=-1, compare=False)


@dataclass(frozen=True)
class PropertyToken:
    """A top-level ``key = value`` line inside a profile."""

    key: str
    value: str
    line_number: int = field(default=-1, compare=False)


@dataclass(frozen=True)
class ContinuationToken:
    """An indented line extending the value of the previous property."""

    value: str
    line_number: int = field(default=-1, compare=False)


@dataclass(frozen=True)
class SubPropertyToken:
    """An indented ``key = value`` line nested under an empty property."""

    key: str
    value: str
    line_number: int = field(default=-1, compare=False)


Token = Union[ProfileToken, PropertyToken, ContinuationToken, SubPropertyToken]


__all__ = [
    "ContinuationToken",
    "FileLine",
    "FileType",
    "ProfileToken",
    "PropertyToken",
    "SubPropertyToken",
    "Token",
]

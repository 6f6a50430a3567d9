"""
Write a profile map back out in shared file syntax.
"""

from typing import List

from sharedconfig.verticals.profile import FileLine, FileType
from sharedconfig.verticals.profile.assembler import ProfileMap
from sharedconfig.verticals.profile.parse_fns import DEFAULT_PROFILE, PROFILE_KEYWORD
from sharedconfig.verticals.profile.text_utils import (
    COMMENT_CHARS,
    INLINE_COMMENT_PATTERN,
    is_profile,
)


INDENT = "  "


def _header(name: str, file_type: FileType) -> str:
    if file_type == FileType.CONFIGURATION and name != DEFAULT_PROFILE:
        return f"[{PROFILE_KEYWORD} {name}]"
    return f"[{name}]"


def _can_continue_at(value: str, i: int) -> bool:
    """
    Whether value can be cut at the space at index i.

    Continuations are trimmed and rejoined with a single space, so the cut
    needs a single space between two non-blank characters, and the rest
    must not read back as a comment line or a profile header.
    """
    if value[i] != " " or i == 0 or i + 1 >= len(value):
        return False
    if value[i - 1].isspace() or value[i + 1].isspace():
        return False
    rest = value[i + 1 :]
    return not rest.startswith(COMMENT_CHARS) and not is_profile(
        FileLine(line_number=0, content=INDENT + rest)
    )


def _property_lines(key: str, value: str) -> List[str]:
    """
    Write a top-level property.

    A value holding whitespace followed by `#` or `;` would lose that part
    as an inline comment, so it is moved to a continuation line, where
    comments are kept.
    """
    match = INLINE_COMMENT_PATTERN.search(value)
    if match is not None:
        for i in range(match.start(), 0, -1):
            if _can_continue_at(value, i):
                return [f"{key} = {value[:i]}", f"{INDENT}{value[i + 1:]}"]
    return [f"{key} = {value}".rstrip()]


def dump_profiles(profiles: ProfileMap, file_type: FileType) -> str:
    """
    Render profiles as config or credentials file text.

    Properties holding sub-properties are written with an empty value
    followed by their indented children, so the output parses back into
    the same map.
    """
    lines: List[str] = []
    for name, profile in profiles.items():
        if lines:
            lines.append("")
        lines.append(_header(name, file_type))
        for key, prop in profile.properties.items():
            if prop.sub_properties:
                lines.append(f"{key} =")
                for sub_key, sub_value in prop.sub_properties.items():
                    lines.append(f"{INDENT}{sub_key} = {sub_value}")
            else:
                lines.extend(_property_lines(key, prop.value))
    return "\n".join(lines) + "\n" if lines else ""

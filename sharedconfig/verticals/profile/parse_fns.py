"""
Grammar rules for shared config and credentials files.

Each rule tries to turn one line into a token. Rules return None when the
line does not match, which includes lines that are syntactically fine but
not allowed by the current parser state (for example a property before any
profile header).
"""

from typing import Callable, Optional

from sharedconfig.verticals.profile import (
    ContinuationToken,
    FileLine,
    ProfileToken,
    PropertyToken,
    SubPropertyToken,
    Token,
)
from sharedconfig.verticals.profile.text_utils import (
    is_continuation,
    is_profile,
    is_property,
    is_sub_property,
    is_valid_identifier,
    split_property,
    split_whitespace,
    strip_comments,
    strip_inline_comments,
)


DEFAULT_PROFILE = "default"
PROFILE_KEYWORD = "profile"

ParseFn = Callable[
    [FileLine, Optional[ProfileToken], Optional[PropertyToken]], Optional[Token]
]


def _header_body(line: FileLine) -> str:
    return strip_comments(line.content).strip()[1:-1]


def configuration_profile(
    line: FileLine,
    current_profile: Optional[ProfileToken],
    last_property: Optional[PropertyToken],
) -> Optional[ProfileToken]:
    """
    Format: [ Whitespace? profile Whitespace Identifier Whitespace? ] or [default]

    Anything else between the brackets still produces a profile token, flagged
    invalid, so the lines that follow are attributed to it.
    """
    if not is_profile(line):
        return None

    parts = split_whitespace(_header_body(line), limit=2)
    is_default = len(parts) == 1 and parts[0] == DEFAULT_PROFILE
    has_prefix = bool(parts) and parts[0] == PROFILE_KEYWORD
    is_valid = is_default or (
        len(parts) == 2 and has_prefix and is_valid_identifier(parts[1])
    )
    return ProfileToken(
        is_default=is_default,
        name=parts[-1] if parts else "",
        is_valid=is_valid,
        has_profile_prefix=has_prefix,
        line_number=line.line_number,
    )


def credentials_profile(
    line: FileLine,
    current_profile: Optional[ProfileToken],
    last_property: Optional[PropertyToken],
) -> Optional[ProfileToken]:
    """Format: [ Whitespace? Identifier Whitespace? ]"""
    if not is_profile(line):
        return None

    name = _header_body(line).strip()
    return ProfileToken(
        is_default=False,
        name=name,
        is_valid=is_valid_identifier(name),
        line_number=line.line_number,
    )


def property_fn(
    line: FileLine,
    current_profile: Optional[ProfileToken],
    last_property: Optional[PropertyToken],
) -> Optional[PropertyToken]:
    """
    Format: Identifier Whitespace? = Whitespace? Value? (Whitespace Comment)?

    Property values may be empty, in which case the property can own
    sub-properties.
    """
    if current_profile is None or not is_property(line):
        return None

    key, value = split_property(line.content)
    return PropertyToken(
        key=key,
        value=strip_inline_comments(value).strip(),
        line_number=line.line_number,
    )


def continuation(
    line: FileLine,
    current_profile: Optional[ProfileToken],
    last_property: Optional[PropertyToken],
) -> Optional[ContinuationToken]:
    """
    Format: Whitespace Value Whitespace?

    Extends a property that already has a value. Comments are part of the value.
    """
    if not is_continuation(line):
        return None
    if last_property is None or not last_property.value:
        return None

    return ContinuationToken(value=line.content.strip(), line_number=line.line_number)


def sub_property(
    line: FileLine,
    current_profile: Optional[ProfileToken],
    last_property: Optional[PropertyToken],
) -> Optional[SubPropertyToken]:
    """
    Format: Whitespace Identifier Whitespace? = Whitespace? Value Whitespace?

    Only valid below a property with an empty value. Unlike top-level
    properties, a `#` or `;` is kept as part of the value.
    """
    if not is_sub_property(line):
        return None
    if last_property is None or last_property.value:
        return None

    key, value = split_property(line.content)
    return SubPropertyToken(key=key, value=value, line_number=line.line_number)

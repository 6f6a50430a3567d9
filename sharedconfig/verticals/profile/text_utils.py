"""
Line classification and text cleaning helpers for shared config files.

Every function here is pure: it inspects the text it is given and never
fails, it only classifies or returns a cleaned copy.
"""

import re
from typing import List, Tuple

from sharedconfig.verticals.profile import FileLine


COMMENT_CHARS = ("#", ";")

# An inline comment needs whitespace before it, so `key = a#b` keeps `a#b`
INLINE_COMMENT_PATTERN = re.compile(r"\s+[#;].*$")

# Characters allowed in profile names and property keys besides alphanumerics
IDENTIFIER_EXTRA_CHARS = frozenset("_-.%@")


def is_blank(text: str) -> bool:
    return not text.strip()


def is_comment_line(text: str) -> bool:
    """Return True when the first non-whitespace character starts a comment."""
    return text.lstrip().startswith(COMMENT_CHARS)


def strip_comments(text: str) -> str:
    """
    Truncate text at the first comment character, wherever it is.

    Used for profile headers, where anything after `#` or `;` is a comment.
    A full comment line becomes an empty string.
    """
    for i, char in enumerate(text):
        if char in COMMENT_CHARS:
            return text[:i]
    return text


def strip_inline_comments(text: str) -> str:
    """Remove a trailing comment introduced by whitespace followed by `#` or `;`."""
    return INLINE_COMMENT_PATTERN.sub("", text)


def split_whitespace(text: str, limit: int = 0) -> List[str]:
    """
    Split text on runs of whitespace.

    Args:
        text: The text to split.
        limit: Maximum number of parts to return. 0 means no limit.
    """
    if limit > 0:
        return text.strip().split(None, limit - 1)
    return text.split()


def split_property(text: str) -> Tuple[str, str]:
    """Split `key = value` on the first `=`, trimming both sides."""
    key, _, value = text.partition("=")
    return key.strip(), value.strip()


def is_valid_identifier(text: str) -> bool:
    """
    Return True if text is a valid profile name or property key.

    Identifiers are non-empty and made only of alphanumerics and `_-.%@`.
    """
    if not text:
        return False
    return all(char.isalnum() or char in IDENTIFIER_EXTRA_CHARS for char in text)


def _is_indented(content: str) -> bool:
    return content[:1].isspace()


def is_profile(line: FileLine) -> bool:
    header = strip_comments(line.content).strip()
    return header.startswith("[") and header.endswith("]")


def is_property(line: FileLine) -> bool:
    content = line.content
    if is_blank(content) or is_comment_line(content):
        return False
    return not _is_indented(content) and "=" in content


def is_continuation(line: FileLine) -> bool:
    content = line.content
    return not is_blank(content) and _is_indented(content)


def is_sub_property(line: FileLine) -> bool:
    """An indented line that also has `key = value` shape."""
    return is_continuation(line) and "=" in line.content

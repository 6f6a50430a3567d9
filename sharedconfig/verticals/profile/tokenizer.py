"""
Line-by-line tokenizer for shared config and credentials files.

The grammar is state dependent: whether an indented line is a continuation
or a sub-property, and whether a `key = value` line is accepted at all,
depends on the profile and property seen before it. That state is carried
as an immutable ParserState value from one line to the next.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from sharedconfig.core.errors import ProfileParseError
from sharedconfig.verticals.profile import (
    FileLine,
    FileType,
    ProfileToken,
    PropertyToken,
    Token,
)
from sharedconfig.verticals.profile.parse_fns import (
    ParseFn,
    configuration_profile,
    continuation,
    credentials_profile,
    property_fn,
    sub_property,
)
from sharedconfig.verticals.profile.text_utils import (
    is_blank,
    is_comment_line,
    is_continuation,
    is_property,
)


logger = logging.getLogger(__name__)

# str.splitlines() also breaks on form feeds and unicode separators
LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\n")


class DiagnosticKind(Enum):
    """What went wrong on a line."""

    UNEXPECTED_LINE = "unexpected_line"
    ORPHAN_LINE = "orphan_line"
    INVALID_PROFILE = "invalid_profile"
    INVALID_PROPERTY = "invalid_property"
    IGNORED_PROFILE = "ignored_profile"


@dataclass(frozen=True)
class Diagnostic:
    """A recoverable problem found while parsing a file."""

    line_number: int  # 0-based
    kind: DiagnosticKind
    message: str

    @property
    def is_error(self) -> bool:
        """Whether strict mode treats this diagnostic as fatal."""
        return self.kind != DiagnosticKind.IGNORED_PROFILE


@dataclass(frozen=True)
class ParseOptions:
    """
    Parsing policy.

    In strict mode the first structural error raises ProfileParseError
    instead of being recorded as a diagnostic.
    """

    strict: bool = False


@dataclass(frozen=True)
class ParserState:
    """The profile and property a new line is interpreted against."""

    current_profile: Optional[ProfileToken] = None
    last_property: Optional[PropertyToken] = None

    def advance(self, token: Token) -> "ParserState":
        if isinstance(token, ProfileToken):
            # Invalid profiles become the active context too, so their body
            # is not attributed to the previous profile
            return ParserState(current_profile=token, last_property=None)
        if isinstance(token, PropertyToken):
            return ParserState(
                current_profile=self.current_profile, last_property=token
            )
        return self


# Rules are tried in order, the first match wins
RULES: Dict[FileType, Tuple[ParseFn, ...]] = {
    FileType.CONFIGURATION: (
        configuration_profile,
        property_fn,
        continuation,
        sub_property,
    ),
    FileType.CREDENTIALS: (
        credentials_profile,
        property_fn,
        continuation,
        sub_property,
    ),
}


def split_lines(text: str) -> List[FileLine]:
    """Split raw file text into numbered lines."""
    return [
        FileLine(line_number=i, content=content)
        for i, content in enumerate(LINE_BREAK_PATTERN.split(text))
    ]


def step(
    line: FileLine, state: ParserState, rules: Sequence[ParseFn]
) -> Tuple[Optional[Token], ParserState]:
    """
    Tokenize a single line against the given state.

    Returns:
        Tuple of (token or None if no rule matched, next state)
    """
    for rule in rules:
        token = rule(line, state.current_profile, state.last_property)
        if token is not None:
            return token, state.advance(token)
    return None, state


def _describe_unmatched(line: FileLine, state: ParserState) -> Diagnostic:
    if is_continuation(line):
        return Diagnostic(
            line_number=line.line_number,
            kind=DiagnosticKind.ORPHAN_LINE,
            message="Indented line has no property to attach to",
        )
    if is_property(line) and state.current_profile is None:
        message = "Property defined before any profile"
    else:
        message = "Line does not match any known syntax"
    return Diagnostic(
        line_number=line.line_number,
        kind=DiagnosticKind.UNEXPECTED_LINE,
        message=message,
    )


def tokenize(
    lines: Iterable[FileLine],
    file_type: FileType,
    options: ParseOptions = ParseOptions(),
) -> Tuple[List[Token], List[Diagnostic]]:
    """
    Turn file lines into tokens.

    Blank lines and full comment lines are skipped. Lines that match no rule
    are reported as diagnostics, or raise in strict mode.

    Raises:
        ProfileParseError: In strict mode, on the first unmatched line.
    """
    rules = RULES[file_type]
    state = ParserState()
    tokens: List[Token] = []
    diagnostics: List[Diagnostic] = []

    for line in lines:
        if is_blank(line.content) or is_comment_line(line.content):
            continue

        token, state = step(line, state, rules)
        if token is not None:
            tokens.append(token)
            continue

        diagnostic = _describe_unmatched(line, state)
        if options.strict:
            raise ProfileParseError(diagnostic.message, line.line_number)
        logger.debug(
            "Skipping line %d: %s", line.line_number + 1, diagnostic.message
        )
        diagnostics.append(diagnostic)

    return tokens, diagnostics

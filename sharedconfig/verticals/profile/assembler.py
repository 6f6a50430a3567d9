"""
Fold tokens into a profile map.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Dict, Iterable, List, Optional

from sharedconfig.core.errors import ProfileParseError
from sharedconfig.verticals.profile import (
    ContinuationToken,
    FileType,
    ProfileToken,
    PropertyToken,
    SubPropertyToken,
    Token,
)
from sharedconfig.verticals.profile.parse_fns import DEFAULT_PROFILE
from sharedconfig.verticals.profile.text_utils import is_valid_identifier
from sharedconfig.verticals.profile.tokenizer import (
    Diagnostic,
    DiagnosticKind,
    ParseOptions,
    split_lines,
    tokenize,
)


logger = logging.getLogger(__name__)


@dataclass
class Property:
    """A property value and the sub-properties nested under it."""

    key: str
    value: str
    sub_properties: Dict[str, str] = field(default_factory=dict)


@dataclass
class Profile:
    """A named group of properties, in definition order."""

    name: str
    properties: Dict[str, Property] = field(default_factory=dict)

    def get(self, key: str) -> Optional[str]:
        """Return the value of a property, or None if it is not set."""
        prop = self.properties.get(key)
        return prop.value if prop is not None else None

    def __contains__(self, key: object) -> bool:
        return key in self.properties


ProfileMap = Dict[str, Profile]


@dataclass
class ParseResult:
    """Valid profiles of a file and the problems found while reading it."""

    profiles: ProfileMap = field(default_factory=dict)
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.diagnostics)


class ProfileAssembler:
    """
    Builds a ProfileMap from a token sequence.

    Properties of a profile that appears several times are merged, later
    values winning. Invalid profiles swallow their body and are reported
    as diagnostics instead of appearing in the map.
    """

    def __init__(self, options: ParseOptions = ParseOptions()):
        self.options = options
        self.profiles: ProfileMap = {}
        self.diagnostics: List[Diagnostic] = []
        self._profile: Optional[Profile] = None
        self._target: Optional[Property] = None
        self._ignore_bare_default = False

    def _report(self, line_number: int, kind: DiagnosticKind, message: str) -> None:
        diagnostic = Diagnostic(line_number, kind, message)
        if self.options.strict and diagnostic.is_error:
            raise ProfileParseError(message, line_number)
        logger.debug("Line %d: %s", line_number + 1, message)
        self.diagnostics.append(diagnostic)

    def assemble(self, tokens: Iterable[Token]) -> ProfileMap:
        token_list = list(tokens)
        # `[profile default]` takes precedence over `[default]` in config files
        self._ignore_bare_default = any(
            isinstance(token, ProfileToken)
            and token.is_valid
            and token.has_profile_prefix
            and token.name == DEFAULT_PROFILE
            for token in token_list
        )
        for token in token_list:
            self.add(token)
        return self.profiles

    def add(self, token: Token) -> None:
        if isinstance(token, ProfileToken):
            self._open_profile(token)
        elif isinstance(token, PropertyToken):
            self._set_property(token)
        elif isinstance(token, ContinuationToken):
            if self._target is not None:
                self._target.value = f"{self._target.value} {token.value}"
        elif isinstance(token, SubPropertyToken):
            self._set_sub_property(token)

    def _open_profile(self, token: ProfileToken) -> None:
        self._profile = None
        self._target = None

        if not token.is_valid:
            self._report(
                token.line_number,
                DiagnosticKind.INVALID_PROFILE,
                f"Invalid profile definition '{token.name}'",
            )
            return
        if token.is_default and self._ignore_bare_default:
            self._report(
                token.line_number,
                DiagnosticKind.IGNORED_PROFILE,
                "Ignoring [default] because [profile default] is also defined",
            )
            return

        self._profile = self.profiles.setdefault(token.name, Profile(token.name))

    def _set_property(self, token: PropertyToken) -> None:
        self._target = None
        if self._profile is None:
            return
        if not is_valid_identifier(token.key):
            self._report(
                token.line_number,
                DiagnosticKind.INVALID_PROPERTY,
                f"Invalid property name '{token.key}' in profile "
                f"'{self._profile.name}'",
            )
            return

        self._target = Property(token.key, token.value)
        self._profile.properties[token.key] = self._target

    def _set_sub_property(self, token: SubPropertyToken) -> None:
        if self._target is None:
            return
        if not is_valid_identifier(token.key):
            self._report(
                token.line_number,
                DiagnosticKind.INVALID_PROPERTY,
                f"Invalid sub-property name '{token.key}' under "
                f"'{self._target.key}'",
            )
            return
        self._target.sub_properties[token.key] = token.value


def parse_profiles(
    text: str,
    file_type: FileType,
    options: ParseOptions = ParseOptions(),
) -> ParseResult:
    """
    Parse the text of a shared config or credentials file.

    Raises:
        ProfileParseError: In strict mode, on the first structural error in
            line order, whichever stage detects it.
    """
    # Both stages run leniently so the earliest error is the one raised
    lenient = replace(options, strict=False)
    tokens, diagnostics = tokenize(split_lines(text), file_type, lenient)

    assembler = ProfileAssembler(lenient)
    profiles = assembler.assemble(tokens)

    diagnostics = sorted(
        diagnostics + assembler.diagnostics, key=lambda d: d.line_number
    )
    if options.strict:
        for diagnostic in diagnostics:
            if diagnostic.is_error:
                raise ProfileParseError(diagnostic.message, diagnostic.line_number)
    return ParseResult(profiles=profiles, diagnostics=diagnostics)

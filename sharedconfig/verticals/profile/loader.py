"""
Read shared config and credentials files from disk.
"""

import logging
from pathlib import Path

from sharedconfig.verticals.profile import FileType
from sharedconfig.verticals.profile.assembler import ParseResult, parse_profiles
from sharedconfig.verticals.profile.tokenizer import ParseOptions


logger = logging.getLogger(__name__)

BYTE_ORDER_MARK = "\ufeff"


def load_profile_file(
    path: Path,
    file_type: FileType,
    options: ParseOptions = ParseOptions(),
) -> ParseResult:
    """
    Parse the file at path.

    A missing file is not an error: it simply defines no profiles. Bytes
    that are not valid UTF-8 are dropped.

    Raises:
        OSError: If the file exists but cannot be read.
        ProfileParseError: In strict mode, on a structural error.
    """
    if not path.exists() or not path.is_file():
        logger.debug("No %s file at %s", file_type.name.lower(), path)
        return ParseResult()

    content = path.read_text(encoding="utf-8", errors="ignore")
    content = content.lstrip(BYTE_ORDER_MARK)
    result = parse_profiles(content, file_type, options)
    logger.debug(
        "Loaded %d profile(s) from %s with %d diagnostic(s)",
        len(result.profiles),
        path,
        len(result.diagnostics),
    )
    return result

"""
Tests for writing profiles back to text.
"""

from sharedconfig.verticals.profile import FileType
from sharedconfig.verticals.profile.assembler import parse_profiles
from sharedconfig.verticals.profile.serializer import dump_profiles


CONFIG_TEXT = """# managed by hand
[default]
region = us-east-1

[profile dev]
region = us-west-2 ; oregon
s3 =
  max_concurrent_requests = 20 # keep this
  addressing_style = path
cli_pager = less
  -R
output =
"""


class TestDumpProfiles:
    """Tests for dump_profiles."""

    def test_config_file_output(self):
        """
        GIVEN parsed config file profiles
        WHEN dumping them
        THEN headers use the config syntax and sub-properties are indented
        """
        profiles = parse_profiles(CONFIG_TEXT, FileType.CONFIGURATION).profiles

        assert dump_profiles(profiles, FileType.CONFIGURATION) == (
            "[default]\n"
            "region = us-east-1\n"
            "\n"
            "[profile dev]\n"
            "region = us-west-2\n"
            "s3 =\n"
            "  max_concurrent_requests = 20 # keep this\n"
            "  addressing_style = path\n"
            "cli_pager = less -R\n"
            "output =\n"
        )

    def test_credentials_headers_have_no_keyword(self):
        profiles = parse_profiles(
            "[dev]\naws_access_key_id = AKID\n", FileType.CREDENTIALS
        ).profiles

        assert dump_profiles(profiles, FileType.CREDENTIALS) == (
            "[dev]\naws_access_key_id = AKID\n"
        )

    def test_reparsing_output_gives_same_profiles(self):
        """
        GIVEN profiles parsed from a file
        WHEN dumping and parsing them again
        THEN the same profiles come back
        """
        profiles = parse_profiles(CONFIG_TEXT, FileType.CONFIGURATION).profiles

        text = dump_profiles(profiles, FileType.CONFIGURATION)
        reparsed = parse_profiles(text, FileType.CONFIGURATION)

        assert reparsed.profiles == profiles
        assert reparsed.diagnostics == []

    def test_continued_value_with_comment_character_survives_reparsing(self):
        """
        GIVEN a value whose continuation line holds a `;` after a space
        WHEN dumping and parsing it again
        THEN the text after the `;` is not taken for an inline comment
        """
        profiles = parse_profiles(
            "[default]\nkey = a\n  b ;c\n", FileType.CREDENTIALS
        ).profiles
        assert profiles["default"].get("key") == "a b ;c"

        text = dump_profiles(profiles, FileType.CREDENTIALS)
        reparsed = parse_profiles(text, FileType.CREDENTIALS)

        assert text == "[default]\nkey = a\n  b ;c\n"
        assert reparsed.profiles == profiles
        assert reparsed.diagnostics == []

    def test_comment_character_after_several_spaces(self):
        profiles = parse_profiles(
            "[profile dev]\ncli_pager = less\n  -R  # raw\n", FileType.CONFIGURATION
        ).profiles

        text = dump_profiles(profiles, FileType.CONFIGURATION)
        reparsed = parse_profiles(text, FileType.CONFIGURATION)

        assert reparsed.profiles["dev"].get("cli_pager") == "less -R  # raw"

    def test_empty_map(self):
        assert dump_profiles({}, FileType.CONFIGURATION) == ""

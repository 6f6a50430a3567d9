"""
Tests for line classification and text cleaning helpers.
"""

import pytest

from sharedconfig.verticals.profile import FileLine
from sharedconfig.verticals.profile.text_utils import (
    is_comment_line,
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


def line(content: str) -> FileLine:
    return FileLine(line_number=0, content=content)


class TestCommentStripping:
    """Tests for the two comment stripping modes."""

    def test_strip_comments_truncates_at_first_comment_char(self):
        """
        GIVEN a profile header followed by a comment
        WHEN stripping comments
        THEN everything from the comment character is removed
        """
        assert strip_comments("[default] # main profile") == "[default] "
        assert strip_comments("[default];comment") == "[default]"

    def test_strip_comments_blanks_full_comment_line(self):
        """
        GIVEN a line that is only a comment
        WHEN stripping comments
        THEN the result is empty
        """
        assert strip_comments("# just a comment") == ""
        assert strip_comments("; also a comment") == ""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("value # comment", "value"),
            ("value ; comment", "value"),
            ("value\t#comment", "value"),
            ("a#b", "a#b"),
            ("a;b", "a;b"),
            ("value", "value"),
        ],
    )
    def test_strip_inline_comments(self, text, expected):
        """
        GIVEN a property value
        WHEN stripping inline comments
        THEN only comments preceded by whitespace are removed
        """
        assert strip_inline_comments(text) == expected

    def test_is_comment_line(self):
        """
        GIVEN lines starting with comment characters, possibly indented
        WHEN checking whether they are comment lines
        THEN only those whose first non-blank character is `#` or `;` match
        """
        assert is_comment_line("# comment")
        assert is_comment_line("   ; comment")
        assert not is_comment_line("key = value # comment")


class TestSplitting:
    """Tests for whitespace and property splitting."""

    def test_split_whitespace_with_limit(self):
        """
        GIVEN a profile header body with several words
        WHEN splitting with a limit of 2
        THEN the remainder is kept in the second part
        """
        assert split_whitespace("profile  foo bar", limit=2) == ["profile", "foo bar"]

    def test_split_whitespace_without_limit(self):
        assert split_whitespace("  a  b\tc ") == ["a", "b", "c"]

    def test_split_property_on_first_equals(self):
        """
        GIVEN a property whose value contains `=`
        WHEN splitting it
        THEN only the first `=` separates key and value
        """
        assert split_property("key = a = b") == ("key", "a = b")

    def test_split_property_with_empty_value(self):
        assert split_property("key =   ") == ("key", "")


class TestIsValidIdentifier:
    """Tests for identifier validation."""

    @pytest.mark.parametrize(
        "name", ["foo", "Foo", "foo-bar", "foo_bar", "foo.bar", "50%", "a@b", "1bad"]
    )
    def test_valid(self, name):
        assert is_valid_identifier(name)

    @pytest.mark.parametrize("name", ["", "bad!name", "foo bar", "a/b", "[x]", "é=x"])
    def test_invalid(self, name):
        assert not is_valid_identifier(name)


class TestLineClassifier:
    """Tests for the line classification predicates."""

    @pytest.mark.parametrize(
        "content",
        ["[default]", "  [default]  ", "[profile dev] ; comment", "[profile dev]#x"],
    )
    def test_is_profile(self, content):
        assert is_profile(line(content))

    @pytest.mark.parametrize("content", ["[default", "key = [x]", "# [default]", ""])
    def test_is_not_profile(self, content):
        assert not is_profile(line(content))

    def test_is_property(self):
        """
        GIVEN property-like lines
        WHEN classifying them
        THEN only non-indented lines containing `=` are properties
        """
        assert is_property(line("key = value"))
        assert is_property(line("key="))
        assert not is_property(line("  key = value"))
        assert not is_property(line("# key = value"))
        assert not is_property(line("key"))

    def test_is_continuation(self):
        assert is_continuation(line("  more text"))
        assert is_continuation(line("\tkey = value"))
        assert not is_continuation(line("more text"))
        assert not is_continuation(line("    "))

    def test_is_sub_property(self):
        assert is_sub_property(line("  key = value"))
        assert not is_sub_property(line("  more text"))
        assert not is_sub_property(line("key = value"))

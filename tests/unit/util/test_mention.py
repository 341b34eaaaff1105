"""Unit tests for mention extraction."""

import pytest

from lostfound.util.mention import extract_mentions


class TestExtractMentions:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Is this yours @alice?", ["alice"]),
            ("@alice, @bob. @carol!", ["alice", "bob", "carol"]),
            ("@alice @alice", ["alice", "alice"]),
            ("@john_doe99 found it", ["john_doe99"]),
            ("email me at a@b", ["b"]),
            ("just an @ sign", []),
            ("no mentions here", []),
            ("", []),
        ],
    )
    def test_extract(self, text, expected):
        assert extract_mentions(text) == expected

    def test_hyphen_ends_handle(self):
        """Handles are word characters only."""
        assert extract_mentions("@mary-jane") == ["mary"]

    def test_non_ascii_letter_ends_handle(self):
        """Only ASCII letters count as handle characters."""
        assert extract_mentions("hi @bobé and @élise") == ["bob"]

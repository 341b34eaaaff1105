"""@mention parsing for comment text.

A mention is "@" followed by the longest run of ASCII word characters
(A-Z, a-z, 0-9, underscore). Accented letters end a handle. "@alice,"
and "@alice." both mention "alice"; a bare "@" mentions nobody.
"""

import re
from typing import Iterator

MENTION_PATTERN = re.compile(r"@(\w+)", re.ASCII)


def iter_mentions(text: str) -> Iterator[str]:
    """Yield mentioned handles (without "@") in order of appearance."""
    for match in MENTION_PATTERN.finditer(text):
        yield match.group(1)


def extract_mentions(text: str) -> list[str]:
    """Extract @mentioned handles from text.

    Duplicates are kept; resolving handles to users collapses them.

    Args:
        text: Raw comment text

    Returns:
        Handles without the "@" prefix, in order of appearance
    """
    return list(iter_mentions(text))

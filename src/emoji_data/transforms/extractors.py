"""Field extraction utilities for tokenized emoji-test lines."""
import logging
import re
from typing import Dict, List, Optional

from ..schema import FIELD_SEPARATOR, COMMENT_MARKER

logger = logging.getLogger(__name__)

# Emoji version tag, e.g. "E13.1". Files older than Unicode 13.0 have none.
VERSION_TAG_PATTERN = re.compile(r'^E\d+\.\d+$')


def _marker_index(fields: List[str], marker: str) -> Optional[int]:
    try:
        return fields.index(marker)
    except ValueError:
        return None


def _token_after(fields: List[str], marker: str) -> str:
    index = _marker_index(fields, marker)
    if index is None or index + 1 >= len(fields):
        return ''
    return fields[index + 1]


def extract_codepoints(fields: List[str]) -> str:
    """
    Extract the codepoint sequence from a tokenized line.

    Tokens before the ``;`` marker are joined with single spaces, so both a
    pre-joined first field and one token per codepoint are accepted. No hex
    validation is done.

    Args:
        fields: Tokens of one line

    Returns:
        Space-separated codepoints, or an empty string if there are none
    """
    end = _marker_index(fields, FIELD_SEPARATOR)
    if end is None:
        end = len(fields)
    return ' '.join(token for token in fields[:end] if token)


def extract_qualification(fields: List[str]) -> str:
    """Extract the qualification label (e.g. "fully-qualified")."""
    qualification = _token_after(fields, FIELD_SEPARATOR)
    if qualification == COMMENT_MARKER:
        return ''
    return qualification


def extract_character(fields: List[str]) -> str:
    """Extract the rendered emoji, the first token of the comment block."""
    return _token_after(fields, COMMENT_MARKER)


def extract_name(fields: List[str]) -> str:
    """
    Extract the descriptive name from the comment block.

    Everything after the character and its version tag is the name, e.g.
    "grinning face" or "waving hand: light skin tone".

    Args:
        fields: Tokens of one line

    Returns:
        Name words joined with single spaces, or an empty string
    """
    index = _marker_index(fields, COMMENT_MARKER)
    if index is None:
        return ''

    words = fields[index + 2:]
    if words and VERSION_TAG_PATTERN.match(words[0]):
        words = words[1:]
    return ' '.join(words)


def get_all_fields(fields: List[str]) -> Dict[str, str]:
    """
    Extract every column of a tokenized data line.

    Args:
        fields: Tokens of one line

    Returns:
        Dictionary with codepoints, qualification, character and name.
        Columns missing from a truncated line are empty strings.
    """
    data = {
        'codepoints': extract_codepoints(fields),
        'qualification': extract_qualification(fields),
        'character': extract_character(fields),
        'name': extract_name(fields),
    }

    missing = [key for key, value in data.items() if not value]
    if missing:
        logger.debug(f"Line is missing columns {missing}: {fields}")

    return data

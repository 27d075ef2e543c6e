"""Line classification and qualification filtering for emoji-test.txt."""
import re
from enum import Enum
from typing import Optional

from ..schema import FULLY_QUALIFIED, COMMENT_MARKER

# "# group: Smileys & Emotion", optionally indented. "# subgroup:" does not match.
GROUP_HEADER_PATTERN = re.compile(r'^\s*#\s*group:\s*(\S.*?)\s*$')


class LineKind(Enum):
    BLANK = 'blank'
    GROUP_HEADER = 'group_header'
    COMMENT = 'comment'
    DATA = 'data'


def parse_group_header(line: str) -> Optional[str]:
    """Return the group name if the line is a group header, else None."""
    match = GROUP_HEADER_PATTERN.match(line)
    if match is None:
        return None
    return match.group(1)


def classify_line(line: str) -> LineKind:
    """Decide how the scanner should treat one raw line."""
    stripped = line.strip()
    if not stripped:
        return LineKind.BLANK
    if parse_group_header(line) is not None:
        return LineKind.GROUP_HEADER
    if stripped.startswith(COMMENT_MARKER):
        return LineKind.COMMENT
    return LineKind.DATA


def is_fully_qualified(qualification: str) -> bool:
    """Only the canonical fully-qualified sequence of an emoji is kept."""
    return qualification == FULLY_QUALIFIED

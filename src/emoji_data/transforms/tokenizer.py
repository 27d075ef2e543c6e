"""Line tokenization for the emoji-test.txt format."""
from typing import List

from ..schema import FIELD_SEPARATOR, COMMENT_MARKER


def tokenize_line(line: str) -> List[str]:
    """
    Split one emoji-test data line into ordered column tokens.

    A well-formed line such as
    ``1F636 200D 1F32B FE0F ; fully-qualified # 😶‍🌫️ E13.1 face in clouds``
    becomes ``['1F636 200D 1F32B FE0F', ';', 'fully-qualified', '#', '😶‍🌫️',
    'E13.1', 'face', 'in', 'clouds']``.

    Column padding is collapsed. Truncated lines produce a shorter list and
    blank lines produce an empty one.

    Args:
        line: Raw line from the data file

    Returns:
        List of tokens in source order
    """
    line = line.strip()
    if not line:
        return []

    codepoints, separator, rest = line.partition(FIELD_SEPARATOR)
    fields = [' '.join(codepoints.split())]
    if not separator:
        return fields

    qualification, marker, comment = rest.partition(COMMENT_MARKER)
    fields.append(FIELD_SEPARATOR)
    fields.extend(qualification.split())
    if not marker:
        return fields

    fields.append(COMMENT_MARKER)
    fields.extend(comment.split())
    return fields

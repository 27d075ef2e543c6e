"""Build the grouped emoji catalog from emoji-test.txt."""
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from .annotations import AnnotationTable, resolve_annotation
from .schema import Catalog, EmojiRecord
from .transforms.extractors import get_all_fields
from .transforms.filters import LineKind, classify_line, is_fully_qualified, parse_group_header
from .transforms.tokenizer import tokenize_line

logger = logging.getLogger(__name__)


# ============================================================================
# SCANNER STATE
# ============================================================================

@dataclass(frozen=True)
class NoGroup:
    """No group header has been seen yet."""


@dataclass(frozen=True)
class InGroup:
    """Data lines belong to the named group."""
    name: str


ScanState = Union[NoGroup, InGroup]


# ============================================================================
# ASSEMBLY
# ============================================================================

def assemble_emoji(fields: List[str], annotations: Optional[AnnotationTable]) -> Optional[EmojiRecord]:
    """
    Build an EmojiRecord from one tokenized data line.

    Args:
        fields: Tokens of the line
        annotations: Glyph-keyed annotation table

    Returns:
        The record, or None if the line is not fully-qualified or is missing
        its codepoints or character
    """
    data = get_all_fields(fields)

    if not is_fully_qualified(data['qualification']):
        return None

    if not data['codepoints'] or not data['character']:
        logger.debug(f"Skipping truncated line: {fields}")
        return None

    name, keywords = resolve_annotation(data['character'], annotations, data['name'])
    return EmojiRecord(
        codepoints=data['codepoints'],
        character=data['character'],
        name=name,
        annotations=keywords,
    )


class LineScanner:
    """Walks emoji-test lines, tracking the active group."""

    def __init__(self, annotations: Optional[AnnotationTable] = None):
        self.annotations = annotations or {}
        self.state: ScanState = NoGroup()
        self.catalog: Catalog = {}
        self.skipped = 0

    def feed(self, line: str) -> None:
        """Process one raw line."""
        kind = classify_line(line)

        if kind is LineKind.GROUP_HEADER:
            name = parse_group_header(line)
            self.state = InGroup(name)
            self.catalog.setdefault(name, [])
            return

        if kind is not LineKind.DATA:
            return

        if isinstance(self.state, NoGroup):
            logger.debug(f"Dropping data line before any group header: {line.strip()}")
            self.skipped += 1
            return

        emoji = assemble_emoji(tokenize_line(line), self.annotations)
        if emoji is None:
            self.skipped += 1
            return

        self.catalog[self.state.name].append(emoji)


# ============================================================================
# CATALOG
# ============================================================================

def parse_emojis(text: str, annotations: Optional[AnnotationTable] = None) -> Catalog:
    """
    Parse the full emoji-test.txt text into a group -> emojis mapping.

    Groups appear in the order of their headers and emojis in source order.
    Only fully-qualified emojis are kept.

    Args:
        text: Raw emoji-test.txt contents
        annotations: Glyph-keyed annotation table

    Returns:
        Catalog mapping group name to its emojis
    """
    scanner = LineScanner(annotations)
    for line in text.splitlines():
        scanner.feed(line)

    total = sum(len(emojis) for emojis in scanner.catalog.values())
    logger.info(f"Parsed {total} emojis in {len(scanner.catalog)} groups ({scanner.skipped} lines skipped)")
    return scanner.catalog


def catalog_to_dict(catalog: Catalog) -> Dict[str, List[Dict[str, Any]]]:
    """Convert a catalog to plain JSON-ready data."""
    return {
        group: [emoji.to_dict() for emoji in emojis]
        for group, emojis in catalog.items()
    }


def dump_catalog(catalog: Catalog, indent: Optional[int] = None) -> str:
    """Serialize a catalog to JSON, leaving glyphs unescaped."""
    return json.dumps(catalog_to_dict(catalog), ensure_ascii=False, indent=indent)

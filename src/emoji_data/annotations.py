"""CLDR annotation loading and lookup."""
import json
import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from .schema import AnnotationRecord
from .utils import AnnotationFormatError

logger = logging.getLogger(__name__)

AnnotationTable = Mapping[str, AnnotationRecord]


def _string_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [str(item) for item in value]


def parse_annotations(document: Union[str, bytes, Dict[str, Any]]) -> Dict[str, AnnotationRecord]:
    """
    Build the annotation table from a CLDR ``annotations.json`` document.

    The document is shaped
    ``{"annotations": {"annotations": {"😀": {"default": [...], "tts": [...]}}}}``.
    The table is keyed by the emoji glyph exactly as CLDR spells it.

    Args:
        document: JSON text or an already decoded dictionary

    Returns:
        Dictionary mapping glyph to AnnotationRecord

    Raises:
        AnnotationFormatError: If the document is not valid JSON or lacks the
            CLDR envelope
    """
    if isinstance(document, (str, bytes)):
        try:
            document = json.loads(document)
        except json.JSONDecodeError as e:
            raise AnnotationFormatError(f"Annotations document is not valid JSON: {e}") from e

    try:
        entries = document['annotations']['annotations']
    except (KeyError, TypeError) as e:
        raise AnnotationFormatError(f"Annotations document missing 'annotations.annotations': {e}") from e

    if not isinstance(entries, dict):
        raise AnnotationFormatError("'annotations.annotations' must be an object")

    table = {}
    for glyph, entry in entries.items():
        if not isinstance(entry, dict):
            logger.debug(f"Skipping malformed annotation entry for {glyph!r}")
            continue
        table[glyph] = AnnotationRecord(
            default=_string_list(entry.get('default')),
            spoken_form=_string_list(entry.get('tts')),
        )

    logger.info(f"Loaded {len(table)} annotation entries")
    return table


def load_annotations_file(path: str) -> Dict[str, AnnotationRecord]:
    """Load the annotation table from a local CLDR JSON file."""
    with open(path, 'r', encoding='utf-8') as f:
        return parse_annotations(f.read())


def resolve_annotation(key: str, table: Optional[AnnotationTable],
                       fallback_name: str) -> Tuple[str, List[str]]:
    """
    Look up the display name and search terms for one emoji.

    Lookup is an exact match on ``key``. When a record is found its first
    spoken form becomes the name, falling back to ``fallback_name`` if the
    record has none.

    Args:
        key: Lookup key, the emoji glyph
        table: Annotation table, may be None
        fallback_name: Name taken from the emoji-test line

    Returns:
        Tuple of (name, annotations)
    """
    record = table.get(key) if table else None
    if record is None:
        return fallback_name, []

    name = fallback_name
    if record.spoken_form and record.spoken_form[0]:
        name = record.spoken_form[0]

    return name, list(record.default)

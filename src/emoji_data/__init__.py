"""Unicode emoji catalog generator."""
from .annotations import parse_annotations, resolve_annotation
from .catalog import parse_emojis, catalog_to_dict, dump_catalog
from .schema import AnnotationRecord, EmojiRecord

__version__ = "1.0.0"

__all__ = [
    'parse_emojis',
    'parse_annotations',
    'resolve_annotation',
    'catalog_to_dict',
    'dump_catalog',
    'AnnotationRecord',
    'EmojiRecord',
]

"""Record types for the parsed emoji catalog."""
from typing import Dict, Any, List
from dataclasses import dataclass, field

# The only qualification kept in the catalog
FULLY_QUALIFIED = 'fully-qualified'

# Token markers produced by the line tokenizer
FIELD_SEPARATOR = ';'
COMMENT_MARKER = '#'


@dataclass(frozen=True)
class AnnotationRecord:
    """CLDR annotation entry for one emoji."""
    default: List[str] = field(default_factory=list)
    spoken_form: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class EmojiRecord:
    """One fully-qualified emoji with its display name and search terms."""
    codepoints: str
    character: str
    name: str
    annotations: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'codepoints': self.codepoints,
            'character': self.character,
            'name': self.name,
            'annotations': list(self.annotations),
        }


# Group name -> emojis in source order
Catalog = Dict[str, List[EmojiRecord]]

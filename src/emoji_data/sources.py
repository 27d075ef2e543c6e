"""Source URLs for the Unicode emoji data files."""
from typing import Optional

EMOJI_DATA_URL_TEMPLATE = "https://unicode.org/Public/emoji/{version}/emoji-test.txt"
ANNOTATIONS_URL_TEMPLATE = (
    "https://raw.githubusercontent.com/unicode-org/cldr-json/main/"
    "cldr-json/cldr-annotations-full/annotations/{locale}/annotations.json"
)
LATEST_VERSION = "latest"


def format_version(version: Optional[float] = None) -> str:
    """
    Format a Unicode emoji version for use in a data URL.

    Args:
        version: Version number; None or 0 selects the latest release

    Returns:
        "latest", or the version rounded to one decimal place ("15.1")
    """
    if not version:
        return LATEST_VERSION
    return f"{float(version):.1f}"


def get_emoji_data_url(version: Optional[float] = None) -> str:
    """Get the emoji-test.txt URL for a Unicode version."""
    return EMOJI_DATA_URL_TEMPLATE.format(version=format_version(version))


def get_annotations_url(locale: str = "en") -> str:
    """Get the CLDR annotations.json URL for a locale."""
    return ANNOTATIONS_URL_TEMPLATE.format(locale=locale)


class DataUrlProvider:
    """Resolves the data URLs, preferring explicitly configured ones."""

    def __init__(self, version: Optional[float] = None, locale: str = "en",
                 emoji_data_url: str = "", annotations_url: str = ""):
        self.version = version
        self.locale = locale
        self.emoji_data_url = emoji_data_url
        self.annotations_url = annotations_url

    @classmethod
    def from_config(cls, config: dict) -> 'DataUrlProvider':
        return cls(
            version=config.get('unicode_version'),
            locale=config.get('annotations_locale') or "en",
            emoji_data_url=config.get('emoji_data_url', ''),
            annotations_url=config.get('annotations_url', ''),
        )

    def get_emoji_data_url(self) -> str:
        return self.emoji_data_url or get_emoji_data_url(self.version)

    def get_annotations_url(self) -> str:
        return self.annotations_url or get_annotations_url(self.locale)

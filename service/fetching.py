"""Retrieval of the Unicode emoji data files."""
import logging
from typing import Optional

import requests

from emoji_data.annotations import parse_annotations
from emoji_data.catalog import parse_emojis
from emoji_data.schema import Catalog
from emoji_data.sources import DataUrlProvider
from emoji_data.utils import DataFetchError, DEFAULT_FETCH_TIMEOUT

logger = logging.getLogger(__name__)


class UnicodeDataFetcher:
    """Downloads emoji-test.txt and the CLDR annotations and parses them."""

    def __init__(self, url_provider: Optional[DataUrlProvider] = None,
                 timeout: float = DEFAULT_FETCH_TIMEOUT):
        self.url_provider = url_provider or DataUrlProvider()
        self.timeout = timeout
        self.session = requests.Session()
        self.headers = {
            'User-Agent': 'EmojiDataGenerator/1.0 Python/requests'
        }

    def fetch_text(self, url: str) -> str:
        """
        Fetch a text resource as UTF-8.

        Raises:
            DataFetchError: On a connection failure or a non-success status
        """
        logger.info(f"Fetching {url}")
        try:
            response = self.session.get(url, headers=self.headers, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Failed to fetch {url}: {e}")
            raise DataFetchError(url, str(e)) from e

        try:
            return response.content.decode('utf-8')
        except UnicodeDecodeError as e:
            logger.error(f"Response from {url} is not UTF-8: {e}")
            raise DataFetchError(url, "response is not valid UTF-8") from e

    def fetch_emoji_data(self) -> str:
        return self.fetch_text(self.url_provider.get_emoji_data_url())

    def fetch_annotations(self) -> str:
        return self.fetch_text(self.url_provider.get_annotations_url())

    def fetch_catalog(self) -> Catalog:
        """Fetch both sources and build a fresh catalog."""
        emoji_data = self.fetch_emoji_data()
        annotations = parse_annotations(self.fetch_annotations())
        return parse_emojis(emoji_data, annotations)

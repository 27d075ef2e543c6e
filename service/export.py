"""One-shot export of the emoji catalog to a JSON file."""
import logging
from pathlib import Path

from emoji_data.catalog import dump_catalog

logger = logging.getLogger(__name__)


def export_catalog(fetcher, output_path: Path) -> int:
    """Fetch, parse and write the catalog. Returns the number of emojis written."""
    catalog = fetcher.fetch_catalog()

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(dump_catalog(catalog, indent=2))

    total = sum(len(emojis) for emojis in catalog.values())
    logger.info(f"✓ Saved {total} emojis in {len(catalog)} groups to {output_path}")
    return total

"""Emoji data generator - entry point."""
import argparse
import asyncio
import sys
from pathlib import Path

from service import UnicodeDataFetcher, make_app, export_catalog
from emoji_data.sources import DataUrlProvider
from emoji_data.utils import (
    validate_config, ConfigError, DataFetchError, AnnotationFormatError, setup_logging, get_logger,
)

logger = get_logger(__name__)

DEFAULT_OUTPUT = 'output/emojis.json'


async def run_server(fetcher: UnicodeDataFetcher, port: int) -> None:
    """Serve the catalog over HTTP until interrupted."""
    app = make_app(fetcher)
    app.listen(port)
    logger.info(f"🚀 Serving emoji data on port {port}")
    await asyncio.Event().wait()


def main():
    """Entry point with mode selection."""
    parser = argparse.ArgumentParser(description='Unicode Emoji Data Generator')
    parser.add_argument('mode', nargs='?', default='serve', choices=['serve', 'export'],
                        help='serve (HTTP API) or export (write JSON file). Default: serve')
    parser.add_argument('--port', type=int, help='HTTP port for serve mode')
    parser.add_argument('--unicode-version', type=float, help='Unicode emoji version, e.g. 15.1. Default: latest')
    parser.add_argument('--output', default=DEFAULT_OUTPUT, help=f'Output file for export mode. Default: {DEFAULT_OUTPUT}')

    args = parser.parse_args()

    try:
        config = validate_config()
        setup_logging(level=config.get('log_level', 'INFO'), structured=True)

        # Override with CLI args if provided
        if args.port:
            config['port'] = args.port
        if args.unicode_version is not None:
            config['unicode_version'] = args.unicode_version

        fetcher = UnicodeDataFetcher(
            DataUrlProvider.from_config(config),
            timeout=config.get('fetch_timeout', 30),
        )

        if args.mode == 'serve':
            asyncio.run(run_server(fetcher, config.get('port', 8080)))
        elif args.mode == 'export':
            export_catalog(fetcher, Path(args.output))

    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)
    except (DataFetchError, AnnotationFormatError) as e:
        logger.error(f"Could not build emoji catalog: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Server stopped by user")


if __name__ == '__main__':
    main()

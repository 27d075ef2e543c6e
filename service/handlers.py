"""HTTP handlers exposing the emoji catalog as JSON."""
import logging

import tornado.ioloop
import tornado.web

from emoji_data.catalog import dump_catalog
from emoji_data.utils import AnnotationFormatError, DataFetchError

logger = logging.getLogger(__name__)


class EmojiHandler(tornado.web.RequestHandler):
    """Serves the full grouped catalog, rebuilt on every request."""

    def initialize(self, fetcher):
        self.fetcher = fetcher

    def prepare(self):
        if self.request.method != "GET":
            self.set_status(405)
            self.finish(f"{self.request.method} request not allowed")

    async def get(self):
        try:
            catalog = await tornado.ioloop.IOLoop.current().run_in_executor(
                None, self.fetcher.fetch_catalog)
        except (DataFetchError, AnnotationFormatError) as e:
            logger.error(f"Could not build emoji catalog: {e}")
            self.set_status(500)
            self.finish("500 - Could not parse emoji data")
            return

        self.set_header("Content-Type", "application/json; charset=utf-8")
        self.finish(dump_catalog(catalog))


def GetHandlers(fetcher):
    handlers = [
        (r"/", EmojiHandler, dict(fetcher=fetcher)),
    ]
    return handlers


def make_app(fetcher, **kwargs):
    return tornado.web.Application(GetHandlers(fetcher), **kwargs)

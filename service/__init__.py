"""Emoji data service package."""
from .fetching import UnicodeDataFetcher
from .handlers import make_app
from .export import export_catalog

__all__ = ['UnicodeDataFetcher', 'make_app', 'export_catalog']

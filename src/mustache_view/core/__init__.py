"""Core functionality for mustache-view.

This module contains core types, configuration, and errors for the view layer.
"""

from mustache_view.core.config import MUSTACHE_EXT
from mustache_view.core.config import NATIVE_EXT
from mustache_view.core.config import PRESENTER_EXT
from mustache_view.core.config import CacheSettings
from mustache_view.core.config import ViewConfig
from mustache_view.core.enums import CacheEngine
from mustache_view.core.enums import TemplateFormat
from mustache_view.core.errors import MissingViewError
from mustache_view.core.errors import MustacheViewError
from mustache_view.core.errors import PresenterError
from mustache_view.core.errors import ReadError

__all__ = [
    "MUSTACHE_EXT",
    "NATIVE_EXT",
    "PRESENTER_EXT",
    "CacheEngine",
    "CacheSettings",
    "MissingViewError",
    "MustacheViewError",
    "PresenterError",
    "ReadError",
    "TemplateFormat",
    "ViewConfig",
]

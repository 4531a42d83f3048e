"""Template engines used by the view layer."""

from mustache_view.engines.mustache import MustacheRenderer
from mustache_view.engines.native import NativeRenderer
from mustache_view.engines.types import TemplateRenderer

__all__ = [
    "MustacheRenderer",
    "NativeRenderer",
    "TemplateRenderer",
]

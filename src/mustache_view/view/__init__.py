"""View renderers."""

from mustache_view.view.base import BaseView
from mustache_view.view.base import Controller
from mustache_view.view.mustache import MustacheView
from mustache_view.view.partials import PartialsLoader

__all__ = [
    "BaseView",
    "Controller",
    "MustacheView",
    "PartialsLoader",
]

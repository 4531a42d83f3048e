"""mustache-view - Mustache templates for a web framework's view layer.

MustacheView renders ``.mustache`` view files through chevron and leaves
native templates to the framework's own evaluator. Each Mustache view may
have a presenter that supplies the data the template sees.
"""

from mustache_view.cache import TemplateCache
from mustache_view.core import CacheEngine
from mustache_view.core import CacheSettings
from mustache_view.core import MissingViewError
from mustache_view.core import MustacheViewError
from mustache_view.core import PresenterError
from mustache_view.core import ReadError
from mustache_view.core import TemplateFormat
from mustache_view.core import ViewConfig
from mustache_view.engines import MustacheRenderer
from mustache_view.engines import NativeRenderer
from mustache_view.presenters import Presenter
from mustache_view.presenters import PresenterRegistry
from mustache_view.presenters import get_presenter_registry
from mustache_view.project_info import ProjectInfo
from mustache_view.project_info import get_project_info
from mustache_view.view import BaseView
from mustache_view.view import Controller
from mustache_view.view import MustacheView
from mustache_view.view import PartialsLoader

# Public API - supports both direct and module imports
__all__ = [
    "BaseView",
    "CacheEngine",
    "CacheSettings",
    "Controller",
    "MissingViewError",
    "MustacheRenderer",
    "MustacheView",
    "MustacheViewError",
    "NativeRenderer",
    "PartialsLoader",
    "Presenter",
    "PresenterError",
    "PresenterRegistry",
    "ProjectInfo",
    "ReadError",
    "TemplateCache",
    "TemplateFormat",
    "ViewConfig",
    "get_presenter_registry",
    "get_project_info",
]
__version__ = get_project_info().version

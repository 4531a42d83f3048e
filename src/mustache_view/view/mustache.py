"""Mustache view.

MustacheView extends the framework view so that Mustache templates are
rendered through chevron while native templates keep their usual evaluator.
A Mustache template may have a presenter: a factory registered for the view
name, or a class declared in a Python file next to the template with the same
base name. The presenter instance replaces the raw view data as the render
context.
"""

from collections.abc import Mapping
import logging
from pathlib import Path

from mustache_view.cache import TemplateCache
from mustache_view.core.config import MUSTACHE_EXT
from mustache_view.core.config import ViewConfig
from mustache_view.core.enums import CacheEngine
from mustache_view.core.enums import TemplateFormat
from mustache_view.engines.mustache import MustacheRenderer
from mustache_view.engines.types import TemplateRenderer
from mustache_view.observability import record_presenter
from mustache_view.observability import record_result
from mustache_view.observability import record_template
from mustache_view.observability import render_span
from mustache_view.presenters.discovery import load_presenter_class
from mustache_view.presenters.discovery import scan_presenter_file
from mustache_view.presenters.registry import PresenterRegistry
from mustache_view.presenters.registry import get_presenter_registry
from mustache_view.view.base import BaseView
from mustache_view.view.base import Controller
from mustache_view.view.partials import PartialsLoader

logger = logging.getLogger(__name__)

CACHE_SUBDIR = "mustache"


class MustacheView(BaseView):
    """View that renders Mustache templates, falling back on native ones."""

    def __init__(
        self,
        controller: Controller | None = None,
        *,
        config: ViewConfig | None = None,
        registry: PresenterRegistry | None = None,
    ) -> None:
        """Initialize the view and its Mustache engine.

        Args:
            controller: Controller to pull view variables and paths from
            config: View configuration (defaults when omitted)
            registry: Presenter registry (the global one when omitted)

        """
        super().__init__(controller, config=config)
        self.registry = registry if registry is not None else get_presenter_registry()
        self.current_view_file: Path | None = None
        self.mustache: TemplateRenderer = MustacheRenderer(
            cache=TemplateCache(self.get_mustache_cache_path()),
            partials=PartialsLoader(self),
            strict=self.config.strict_variables,
        )

    def _default_ext(self) -> str:
        return self.config.ext

    def evaluate(self, view_file: Path, data: Mapping[str, object]) -> str:
        """Evaluate a view file through Mustache, or natively for native files.

        Args:
            view_file: Template file to evaluate
            data: Variables available to the template

        Returns:
            Rendered output

        Raises:
            ReadError: When the file cannot be read
            PresenterError: When a presenter module cannot be loaded
            chevron.ChevronError: When the Mustache template is malformed

        """
        view_file = Path(view_file)
        if self.get_view_ext(view_file) == self.config.native_ext:
            with render_span(view_file, TemplateFormat.NATIVE) as span:
                rendered = super().evaluate(view_file, data)
                record_result(span, rendered)
            return rendered

        with render_span(view_file, TemplateFormat.MUSTACHE) as span:
            self.current_view_file = view_file
            try:
                template = self.read_template(view_file)
                record_template(span, template)
                render_data = self.resolve_presenter(view_file, data)
                record_presenter(span, render_data, data)
                rendered = self.mustache.render(template, render_data)
            finally:
                self.current_view_file = None
            record_result(span, rendered)
        return rendered

    def get_view_ext(self, view_file: Path) -> str:
        """Get a view file's extension, including the leading dot."""
        return Path(view_file).suffix

    def resolve_presenter(
        self, view_file: Path, data: Mapping[str, object]
    ) -> object | Mapping[str, object]:
        """Get the render data for a view file.

        A factory registered under the view's name, relative to its view
        path, wins. Otherwise the presenter source file next to the view is
        scanned for its first class. Without either, the raw data is returned
        untouched. Files outside every view path have no name and are never
        matched against the registry.

        Args:
            view_file: Template file being rendered
            data: Raw view data

        Returns:
            A presenter instance built with ``(self, data)``, or ``data``

        Raises:
            PresenterError: When the presenter module cannot be loaded

        """
        view_file = Path(view_file)
        view_name = self.get_view_name(view_file)
        factory = self.registry.get(view_name) if view_name else None
        if factory is not None:
            logger.debug(f"Using registered presenter for view: {view_name}")
            return factory(self, data)

        presenter_path = view_file.with_suffix(self.config.presenter_ext)
        if not presenter_path.is_file():
            return data

        class_name = scan_presenter_file(
            presenter_path, strict=self.config.strict_presenters
        )
        if not class_name:
            logger.debug(f"No presenter class declared in {presenter_path}")
            return data

        presenter_cls = load_presenter_class(presenter_path, class_name)
        logger.debug(f"Loaded presenter {class_name} from {presenter_path}")
        return presenter_cls(self, data)

    def get_partial_filename(self, name: str) -> Path | None:
        """Get the file of an element used as a partial, or None."""
        return self.get_element_filename(name)

    def get_mustache_cache_path(self) -> Path | None:
        """Get the compiled template directory, None when caching on disk is off.

        Only file based caches get a directory, placed in a ``mustache``
        subdirectory of the cache path.
        """
        settings = self.config.cache
        if settings.engine == CacheEngine.FILE and settings.path is not None:
            return settings.path / CACHE_SUBDIR
        return None

    def get_extensions(self) -> list[str]:
        """Get the extensions that view files can use.

        The primary extension comes first, followed by the Mustache and native
        extensions when they differ from it.
        """
        exts = [self.ext]
        for ext in (MUSTACHE_EXT, self.config.native_ext):
            if ext not in exts:
                exts.append(ext)
        return exts

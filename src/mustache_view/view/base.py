"""Framework view renderer.

BaseView is the host side of the view layer. It resolves view and element
names to files, holds the variables a controller passes down and evaluates
native templates. Subclasses change how particular files are evaluated.
"""

from collections.abc import Iterator
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

from mustache_view.core.config import ViewConfig
from mustache_view.core.config import check_extension
from mustache_view.core.errors import MissingViewError
from mustache_view.core.errors import ReadError
from mustache_view.engines.native import NativeRenderer


class Controller(Protocol):
    """What a view pulls from the controller that created it.

    ``view_vars`` is required. ``view_paths`` and ``ext`` are optional and
    override the view configuration when present.
    """

    view_vars: Mapping[str, object]


class BaseView:
    """Render views for a single request."""

    def __init__(
        self, controller: Controller | None = None, *, config: ViewConfig | None = None
    ) -> None:
        """Initialize the view.

        Args:
            controller: Controller to pull view variables and paths from
            config: View configuration (defaults when omitted)

        """
        self.config = config or ViewConfig()
        self.view_vars: dict[str, object] = {}
        self.view_paths: list[Path] = list(self.config.view_paths)
        self.ext: str = self._default_ext()

        if controller is not None:
            self.view_vars.update(controller.view_vars)
            controller_paths = getattr(controller, "view_paths", None)
            if controller_paths:
                self.view_paths = [Path(p) for p in controller_paths]
            controller_ext = getattr(controller, "ext", None)
            if controller_ext:
                self.ext = check_extension(controller_ext)

        self._native = NativeRenderer(
            search_paths=self.view_paths, autoescape=self.config.autoescape
        )

    def _default_ext(self) -> str:
        return self.config.native_ext

    def set(self, name: str, value: object) -> None:
        """Set a variable passed to every rendered view."""
        self.view_vars[name] = value

    def get_extensions(self) -> list[str]:
        """Get the extensions that view files can use, in lookup order."""
        return [self.ext]

    def render(self, view_name: str, data: Mapping[str, object] | None = None) -> str:
        """Render a view by name.

        Args:
            view_name: View name without extension, relative to the view paths
            data: Variables merged over the view variables for this render

        Returns:
            Rendered output

        Raises:
            MissingViewError: When no file exists for the view name

        """
        view_file = self.get_view_filename(view_name)
        if view_file is None:
            msg = (
                f"View '{view_name}' not found in "
                f"{[str(p) for p in self.view_paths]} "
                f"with extensions {self.get_extensions()}"
            )
            raise MissingViewError(msg)
        return self.evaluate(view_file, {**self.view_vars, **(data or {})})

    def evaluate(self, view_file: Path, data: Mapping[str, object]) -> str:
        """Evaluate a view file with the native template engine.

        Args:
            view_file: Template file to evaluate
            data: Variables available to the template

        Returns:
            Rendered output

        Raises:
            ReadError: When the file cannot be read
            jinja2.TemplateError: When the template is invalid or a variable is
                missing

        """
        return self._native.render(self.read_template(view_file), data)

    def read_template(self, view_file: Path) -> str:
        """Read a template file as text.

        Raises:
            ReadError: When the file is missing, unreadable or not valid UTF-8

        """
        try:
            return Path(view_file).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            msg = f"Cannot read template {view_file}: {e}"
            raise ReadError(msg) from e

    def get_view_filename(self, name: str) -> Path | None:
        """Find the file for a view name, or None."""
        return self._find_file(name, subdir=None)

    def get_view_name(self, view_file: Path) -> str | None:
        """Get the name of a view file relative to its view path, or None.

        ``posts/index.mustache`` under a view path is named ``posts/index``,
        the same name ``render`` resolves it from.
        """
        resolved = Path(view_file).resolve()
        for base in self.view_paths:
            root = base.resolve()
            if resolved.is_relative_to(root):
                return resolved.relative_to(root).with_suffix("").as_posix()
        return None

    def get_element_filename(self, name: str) -> Path | None:
        """Find the file for an element name, or None."""
        return self._find_file(name, subdir=self.config.elements_dir)

    def iter_element_names(self) -> Iterator[str]:
        """Yield the names of all elements reachable from the view paths."""
        seen: set[str] = set()
        exts = self.get_extensions()
        for base in self.view_paths:
            elements = base / self.config.elements_dir
            if not elements.is_dir():
                continue
            for path in sorted(elements.rglob("*")):
                if not path.is_file() or path.suffix not in exts:
                    continue
                name = path.relative_to(elements).with_suffix("").as_posix()
                if name not in seen:
                    seen.add(name)
                    yield name

    def _find_file(self, name: str, *, subdir: str | None) -> Path | None:
        for base in self.view_paths:
            root = base / subdir if subdir else base
            for ext in self.get_extensions():
                candidate = root / f"{name}{ext}"
                if candidate.is_file():
                    return candidate
        return None


"""Native template engine: Jinja2 with a sandboxed environment."""

from collections.abc import Mapping
from collections.abc import Sequence
from pathlib import Path

from jinja2 import BaseLoader
from jinja2 import FileSystemLoader
from jinja2 import StrictUndefined
from jinja2.sandbox import SandboxedEnvironment


class NativeRenderer:
    """Render the framework's native templates with Jinja2."""

    def __init__(
        self,
        *,
        search_paths: Sequence[Path] = (),
        autoescape: bool = True,
    ) -> None:
        """Initialize the native renderer.

        Args:
            search_paths: Directories used to resolve include and extends
            autoescape: Enable Jinja2's built-in autoescaping

        """
        loader: BaseLoader | None = (
            FileSystemLoader([str(p) for p in search_paths]) if search_paths else None
        )
        self._env = SandboxedEnvironment(
            loader=loader, undefined=StrictUndefined, autoescape=autoescape
        )

    def render(self, template: object, variables: Mapping[str, object]) -> str:
        """Render a native template with variables.

        Args:
            template: Template string with Jinja2 syntax
            variables: Mapping of variable names to values

        Returns:
            Rendered string

        Raises:
            TypeError: When template is not a string
            jinja2.TemplateError: When template syntax is invalid or variables are
                missing

        """
        if not isinstance(template, str):
            msg = f"Native template must be str, got {type(template).__name__}"
            raise TypeError(msg)

        return self._env.from_string(template).render(variables)

"""Mustache template engine using chevron."""

from collections.abc import Mapping

import chevron

from mustache_view.cache import TemplateCache


class MustacheRenderer:
    """Render Mustache (logic-less) templates using chevron."""

    def __init__(
        self,
        *,
        cache: TemplateCache | None = None,
        partials: Mapping[str, str] | None = None,
        strict: bool = False,
    ) -> None:
        """Initialize the Mustache renderer.

        Args:
            cache: Cache of tokenized templates (memory only when omitted)
            partials: Mapping resolving partial names to template sources
            strict: Whether to warn on missing variables

        """
        self.cache = cache if cache is not None else TemplateCache()
        self.partials: Mapping[str, str] = partials if partials is not None else {}
        self.strict = strict

    def render(self, template: object, data: object) -> str:
        """Render Mustache template with data.

        Args:
            template: Template string with {{variable}} syntax
            data: Mapping or object whose keys or attributes fill the template

        Returns:
            Rendered string

        Raises:
            TypeError: When template is not a string
            chevron.ChevronError: When template syntax is invalid

        """
        if not isinstance(template, str):
            msg = f"Mustache template must be str, got {type(template).__name__}"
            raise TypeError(msg)

        tokens = self.cache.get_tokens(template)
        return chevron.render(
            tokens,
            data,
            partials_path=None,
            partials_dict=self.partials,
            warn=self.strict,
        )

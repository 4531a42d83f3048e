"""Protocols shared by the template engines."""

from typing import Any
from typing import Protocol


class TemplateRenderer(Protocol):
    """Protocol for template rendering engines."""

    def render(self, template: object, variables: Any) -> str:
        """Render a template with the provided data."""
        ...

"""Partial lookup for the Mustache engine."""

from collections.abc import Iterator
from collections.abc import Mapping
from typing import TYPE_CHECKING

from mustache_view.core.errors import ReadError

if TYPE_CHECKING:
    from mustache_view.view.mustache import MustacheView


class PartialsLoader(Mapping[str, str]):
    """Resolve ``{{> name}}`` to the source of the view's element ``name``.

    Lookups are lazy and go through the view on every access. An unknown
    name raises KeyError, which chevron renders as an empty partial.
    """

    def __init__(self, view: "MustacheView") -> None:
        self._view = view

    def __getitem__(self, name: str) -> str:
        path = self._view.get_partial_filename(name)
        if path is None:
            raise KeyError(name)
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            msg = f"Cannot read partial '{name}' from {path}: {e}"
            raise ReadError(msg) from e

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return self._view.get_partial_filename(name) is not None

    def __iter__(self) -> Iterator[str]:
        return self._view.iter_element_names()

    def __len__(self) -> int:
        return sum(1 for _ in self)

"""Presenter for hello.mustache, found by its file name."""

from mustache_view import Presenter


class HelloPresenter(Presenter):
    """Title-case the visitor's name and sort the items."""

    @property
    def name(self) -> str:
        return str(self.data.get("name", "world")).title()

    @property
    def items(self) -> list[str]:
        return sorted(self.data.get("items", []))

"""Render the example views.

This example shows:
- A Mustache view with a presenter file next to it
- A partial resolved from the elements directory
- A native view rendered by the fallback engine
- A presenter registered in code instead of a file
"""

from pathlib import Path
import tempfile

from mustache_view import CacheSettings
from mustache_view import MustacheView
from mustache_view import Presenter
from mustache_view import PresenterRegistry
from mustache_view import ViewConfig

VIEWS = Path(__file__).parent / "views"


class Controller:
    """Minimal controller handing variables to the view."""

    def __init__(self) -> None:
        self.view_vars = {"title": "Example", "name": "ada lovelace"}


def main() -> None:
    """Render each example view and print the output."""
    registry = PresenterRegistry()

    @registry.presenter("legacy")
    class LegacyPresenter(Presenter):
        """Never used: native views skip presenters."""

    with tempfile.TemporaryDirectory() as cache_dir:
        config = ViewConfig(
            view_paths=[VIEWS],
            cache=CacheSettings(engine="File", path=Path(cache_dir)),
        )
        view = MustacheView(Controller(), config=config, registry=registry)

        print("--- hello.mustache ---")
        print(view.render("hello", {"items": ["pears", "apples"]}))
        print("--- legacy.j2 ---")
        print(view.render("legacy"))


if __name__ == "__main__":
    main()

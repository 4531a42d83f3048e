"""Base class for view presenters."""

from collections.abc import Mapping
from typing import Any


class Presenter:
    """Wrap a view's raw data for a single template.

    Subclasses expose properties that templates read by name. Names a
    subclass does not define fall back to the raw data, so a presenter only
    has to cover the values it changes.

    Attributes:
        view: The view rendering the template.
        data: The raw view data the presenter was built from.

    """

    def __init__(self, view: Any, data: Mapping[str, object]) -> None:
        """Initialize with the rendering view and its raw data."""
        self.view = view
        self.data = data

    def __getattr__(self, name: str) -> object:
        if name.startswith("_"):
            raise AttributeError(name)
        data = self.__dict__.get("data")
        if data is None or name not in data:
            msg = f"{type(self).__name__!r} has no attribute or data key {name!r}"
            raise AttributeError(msg)
        return data[name]

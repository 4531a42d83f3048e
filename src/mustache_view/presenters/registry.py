"""Presenter registry keyed by view name.

Registered factories are resolved before any presenter source file next to
the view is looked at. A process-wide registry is available through
get_presenter_registry().
"""

from collections.abc import Callable
from collections.abc import Mapping
import logging
from typing import Any

logger = logging.getLogger(__name__)

type PresenterFactory = Callable[[Any, Mapping[str, object]], object]


class PresenterRegistry:
    """Mapping from view names to presenter factories."""

    def __init__(self) -> None:
        self._factories: dict[str, PresenterFactory] = {}

    def register(self, name: str, factory: PresenterFactory) -> None:
        """Register a presenter factory for a view.

        Args:
            name: View name, the view file name without its extension
            factory: Callable taking ``(view, data)`` and returning render data

        Raises:
            ValueError: When a factory is already registered for the name

        """
        if name in self._factories:
            msg = f"Presenter already registered for view '{name}'"
            raise ValueError(msg)
        self._factories[name] = factory
        logger.debug(f"Registered presenter for view: {name}")

    def presenter[F: PresenterFactory](self, name: str) -> Callable[[F], F]:
        """Register the decorated class or function as a view's presenter.

        Example:
            ```python
            registry = PresenterRegistry()

            @registry.presenter("hello")
            class HelloPresenter(Presenter):
                @property
                def name(self) -> str:
                    return "World"
            ```

        """

        def decorator(factory: F) -> F:
            self.register(name, factory)
            return factory

        return decorator

    def get(self, name: str) -> PresenterFactory | None:
        """Get the factory registered for a view, if any."""
        return self._factories.get(name)

    def names(self) -> list[str]:
        """List registered view names."""
        return sorted(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __len__(self) -> int:
        return len(self._factories)


_registry: PresenterRegistry | None = None


def get_presenter_registry() -> PresenterRegistry:
    """Get the global presenter registry instance."""
    global _registry
    if _registry is None:
        _registry = PresenterRegistry()
    return _registry

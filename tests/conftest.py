"""Shared fixtures for view tests."""

from collections.abc import Callable
from pathlib import Path

from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import (
    InMemorySpanExporter,
)
import pytest

from mustache_view import MustacheView
from mustache_view import PresenterRegistry
from mustache_view import ViewConfig

_exporter = InMemorySpanExporter()
_provider = TracerProvider()
_provider.add_span_processor(SimpleSpanProcessor(_exporter))
trace.set_tracer_provider(_provider)


@pytest.fixture
def span_exporter() -> InMemorySpanExporter:
    """Exporter collecting the spans finished during a test."""
    _exporter.clear()
    return _exporter


@pytest.fixture
def views_dir(tmp_path: Path) -> Path:
    """Empty directory used as the only view path."""
    path = tmp_path / "views"
    path.mkdir()
    return path


@pytest.fixture
def write_file(views_dir: Path) -> Callable[[str, str], Path]:
    """Write a file relative to the view path and return its path."""

    def write(name: str, content: str) -> Path:
        path = views_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return write


@pytest.fixture
def registry() -> PresenterRegistry:
    """Presenter registry isolated from the global one."""
    return PresenterRegistry()


@pytest.fixture
def view(views_dir: Path, registry: PresenterRegistry) -> MustacheView:
    """Mustache view rooted at the view path."""
    return MustacheView(config=ViewConfig(view_paths=[views_dir]), registry=registry)

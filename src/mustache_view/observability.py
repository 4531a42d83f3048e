"""OpenTelemetry tracing for view rendering."""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
import time

from opentelemetry import trace
from opentelemetry.trace import Span

from mustache_view.cache import hash_template
from mustache_view.core.enums import TemplateFormat

tracer = trace.get_tracer(__name__)

SPAN_NAME = "mustache_view.evaluate"


@contextmanager
def render_span(view_file: Path, fmt: TemplateFormat) -> Iterator[Span]:
    """Trace the rendering of one view file.

    Args:
        view_file: View file being rendered
        fmt: Engine the file is dispatched to

    Yields:
        The active span, for the caller to annotate

    """
    with tracer.start_as_current_span(SPAN_NAME) as span:
        start_time = time.perf_counter()

        span.set_attribute("view.file", str(view_file))
        span.set_attribute("view.engine", fmt.value)

        yield span

        render_ms = (time.perf_counter() - start_time) * 1000
        span.set_attribute("view.render_ms", render_ms)


def record_template(span: Span, source: str) -> None:
    """Attach a short hash of the template source to the span."""
    span.set_attribute("view.template_hash", hash_template(source)[:16])


def record_presenter(span: Span, render_data: object, data: object) -> None:
    """Attach the presenter class name, empty when raw data is used."""
    name = "" if render_data is data else type(render_data).__name__
    span.set_attribute("view.presenter", name)


def record_result(span: Span, result: str) -> None:
    """Attach the rendered output length to the span."""
    span.set_attribute("view.result_length", len(result))

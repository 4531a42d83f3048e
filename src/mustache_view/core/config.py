"""Configuration for view rendering.

This module provides the settings a view is constructed with, including
template extensions, lookup paths and the template cache location.
"""

from pathlib import Path

from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator

from mustache_view.core.enums import CacheEngine

MUSTACHE_EXT = ".mustache"
NATIVE_EXT = ".j2"
PRESENTER_EXT = ".py"


def check_extension(value: str) -> str:
    """Return a file extension unchanged, rejecting ones without a leading dot.

    Raises:
        ValueError: When the extension does not start with a dot

    """
    if not value.startswith(".") or value == ".":
        msg = f"Extension must start with '.', got {value!r}"
        raise ValueError(msg)
    return value


class CacheSettings(BaseModel):
    """Settings of the host cache subsystem.

    Attributes:
        engine: Name of the active cache backend. Only ``File`` backends
            get a compiled template directory.
        path: Root directory of the file cache.

    """

    engine: str = Field(default=CacheEngine.FILE.value)
    path: Path | None = None


class ViewConfig(BaseModel):
    """Configuration for a view instance.

    Attributes:
        ext: Primary view file extension.
        native_ext: Extension rendered by the native evaluator.
        presenter_ext: Extension of presenter source files.
        view_paths: Directories searched for views and elements, in order.
        elements_dir: Subdirectory of each view path holding elements.
        cache: Cache settings used to locate the template cache.
        strict_variables: Warn about variables missing from the render data.
        autoescape: Enable autoescaping in the native evaluator.
        strict_presenters: Raise instead of ignoring presenter sources that
            fail to tokenize.

    """

    ext: str = Field(default=MUSTACHE_EXT)
    native_ext: str = Field(default=NATIVE_EXT)
    presenter_ext: str = Field(default=PRESENTER_EXT)
    view_paths: list[Path] = Field(default_factory=list)
    elements_dir: str = Field(default="elements")
    cache: CacheSettings = Field(default_factory=CacheSettings)
    strict_variables: bool = Field(default=False)
    autoescape: bool = Field(default=True)
    strict_presenters: bool = Field(default=False)

    @field_validator("ext", "native_ext", "presenter_ext")
    @classmethod
    def _check_extension(cls, value: str) -> str:
        return check_extension(value)

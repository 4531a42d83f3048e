"""Type-safe enumerations for view rendering."""

from enum import StrEnum


class TemplateFormat(StrEnum):
    """Template engines a view file can be rendered with."""

    MUSTACHE = "mustache"
    NATIVE = "native"


class CacheEngine(StrEnum):
    """Cache backends known to the view layer."""

    FILE = "File"
    MEMORY = "Memory"

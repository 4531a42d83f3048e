"""Custom exceptions for mustache-view.

This module provides specialized exception types for view rendering errors.
Errors raised by the template engines themselves are never wrapped.
"""


class MustacheViewError(Exception):
    """Base exception for view-related errors."""


class ReadError(MustacheViewError, OSError):
    """Raised when a view file cannot be read.

    The original ``OSError`` is chained as ``__cause__``.
    """


class MissingViewError(MustacheViewError, LookupError):
    """Raised when a view name does not resolve to a file.

    Every configured view path is tried with every recognized extension
    before this is raised.
    """


class PresenterError(MustacheViewError):
    """Raised when a presenter module cannot be loaded.

    This occurs when:
    - Importing the presenter module raises
    - The discovered class name is not an attribute of the module
    - The presenter source fails to tokenize and strict presenters are enabled
    """

"""Presenters supply or transform the data of a single template."""

from mustache_view.presenters.base import Presenter
from mustache_view.presenters.discovery import find_class_name
from mustache_view.presenters.discovery import load_presenter_class
from mustache_view.presenters.discovery import scan_presenter_file
from mustache_view.presenters.registry import PresenterFactory
from mustache_view.presenters.registry import PresenterRegistry
from mustache_view.presenters.registry import get_presenter_registry

__all__ = [
    "Presenter",
    "PresenterFactory",
    "PresenterRegistry",
    "find_class_name",
    "get_presenter_registry",
    "load_presenter_class",
    "scan_presenter_file",
]

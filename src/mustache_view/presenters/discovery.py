"""Discovery of presenter classes declared in source files.

A presenter file sits next to its view, shares its base name and declares
the presenter as its first top-level class. The file is tokenized lazily,
one line at a time, and scanning stops as soon as that declaration is
complete, so the rest of the file is never read.
"""

import hashlib
import importlib.machinery
import importlib.util
import logging
from pathlib import Path
import sys
import tokenize

from mustache_view.core.errors import PresenterError

logger = logging.getLogger(__name__)

MODULE_PREFIX = "_mustache_view_presenters"


class PresenterLoader(importlib.machinery.SourceFileLoader):
    """Source loader that never writes bytecode next to presenter files."""

    def set_data(self, path: str, data: bytes, *, _mode: int = 0o666) -> None:
        pass


def find_class_name(path: Path) -> str | None:
    """Return the name of the first top-level class declared in a file.

    Args:
        path: Python source file to scan

    Returns:
        The class name, or None when the file declares no class

    Raises:
        tokenize.TokenError: When the source cannot be tokenized
        SyntaxError: When the encoding declaration or indentation is invalid
        UnicodeDecodeError: When the file is not valid in its encoding

    """
    with tokenize.open(path) as f:
        candidate: str | None = None
        expect_name = False
        depth = 0
        for tok in tokenize.generate_tokens(f.readline):
            if expect_name:
                expect_name = False
                if tok.type == tokenize.NAME:
                    candidate = tok.string
                    continue
            at_top_level = tok.start[1] == 0
            if tok.type == tokenize.NAME and tok.string == "class" and at_top_level:
                expect_name = True
                depth = 0
                continue
            if candidate is None or tok.type != tokenize.OP:
                continue
            if tok.string in {"(", "[", "{"}:
                depth += 1
            elif tok.string in {")", "]", "}"}:
                depth -= 1
            elif tok.string == ":" and depth == 0:
                return candidate
    return None


def scan_presenter_file(path: Path, *, strict: bool = False) -> str | None:
    """Find the presenter class name in a file, tolerating broken sources.

    Args:
        path: Presenter source file
        strict: Raise instead of returning None when tokenizing fails

    Returns:
        The class name, or None when there is no usable declaration

    Raises:
        PresenterError: When tokenizing fails and ``strict`` is set

    """
    try:
        return find_class_name(path)
    except (tokenize.TokenError, SyntaxError, UnicodeDecodeError) as e:
        if strict:
            msg = f"Cannot tokenize presenter source {path}: {e}"
            raise PresenterError(msg) from e
        logger.warning(f"Ignoring presenter {path}, it cannot be tokenized: {e}")
        return None


def load_presenter_class(path: Path, class_name: str) -> type:
    """Import a presenter file and return the named class.

    The module is executed on every call, under a name derived from its
    path that replaces any earlier import of the same file. No bytecode is
    written into the view directories.

    Args:
        path: Presenter source file
        class_name: Name of the class to return

    Returns:
        The presenter class

    Raises:
        PresenterError: When the module cannot be imported or lacks the class

    """
    digest = hashlib.sha256(str(path.resolve()).encode()).hexdigest()[:16]
    module_name = f"{MODULE_PREFIX}_{path.stem}_{digest}"
    loader = PresenterLoader(module_name, str(path))
    spec = importlib.util.spec_from_file_location(module_name, path, loader=loader)
    if spec is None:
        msg = f"Cannot import presenter module from {path}"
        raise PresenterError(msg)

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        loader.exec_module(module)
    except Exception as e:
        sys.modules.pop(module_name, None)
        msg = f"Failed to import presenter module {path}: {e}"
        raise PresenterError(msg) from e

    try:
        presenter_cls = getattr(module, class_name)
    except AttributeError as e:
        sys.modules.pop(module_name, None)
        msg = f"Presenter module {path} has no class {class_name!r}"
        raise PresenterError(msg) from e
    if not isinstance(presenter_cls, type):
        sys.modules.pop(module_name, None)
        msg = f"{class_name!r} in {path} is not a class"
        raise PresenterError(msg)
    return presenter_cls

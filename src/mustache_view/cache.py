"""Cache of tokenized Mustache templates.

Templates are keyed by a hash of their source. Tokens live in memory for the
life of the cache and, when a directory is configured, in one JSON file per
template so that later processes can skip tokenizing.
"""

from collections.abc import Iterable
import hashlib
import json
import logging
import os
from pathlib import Path
import tempfile

from chevron.tokenizer import tokenize

logger = logging.getLogger(__name__)

type Token = tuple[str, str]


def hash_template(source: str) -> str:
    """Return the cache key for a template source."""
    return hashlib.sha256(source.encode()).hexdigest()


class TemplateCache:
    """Two-level cache of chevron token lists."""

    def __init__(self, directory: Path | None = None) -> None:
        """Initialize the cache.

        Args:
            directory: Directory for cached token files, None for memory only

        """
        self.directory = directory
        self._tokens: dict[str, list[Token]] = {}

    @property
    def persistent(self) -> bool:
        """Whether tokens are written to disk."""
        return self.directory is not None

    def get_tokens(self, source: str) -> list[Token]:
        """Return the tokens of a template, tokenizing it on a miss.

        Args:
            source: Mustache template source

        Returns:
            List of ``(tag, key)`` tuples accepted by ``chevron.render``

        Raises:
            chevron.ChevronError: When the template is malformed

        """
        key = hash_template(source)
        tokens = self._tokens.get(key)
        if tokens is not None:
            return tokens

        tokens = self._load(key)
        if tokens is None:
            logger.debug(f"Template cache miss: {key[:16]}")
            tokens = list(tokenize(source))
            self._store(key, tokens)
        else:
            logger.debug(f"Template cache hit on disk: {key[:16]}")

        self._tokens[key] = tokens
        return tokens

    def clear(self) -> None:
        """Drop every cached template from memory and disk."""
        self._tokens.clear()
        if self.directory is None or not self.directory.is_dir():
            return
        for cached in self.directory.glob("*.json"):
            cached.unlink(missing_ok=True)

    def __len__(self) -> int:
        return len(self._tokens)

    def _path_for(self, key: str) -> Path:
        assert self.directory is not None
        return self.directory / f"{key}.json"

    def _load(self, key: str) -> list[Token] | None:
        if self.directory is None:
            return None
        path = self._path_for(key)
        if not path.is_file():
            return None
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
            return _as_tokens(raw)
        except (OSError, ValueError, TypeError) as e:
            logger.debug(f"Ignoring unreadable cache file {path}: {e}")
            return None

    def _store(self, key: str, tokens: list[Token]) -> None:
        if self.directory is None:
            return
        self.directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(tokens, f)
            os.replace(tmp_name, self._path_for(key))
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise


def _as_tokens(raw: Iterable[object]) -> list[Token]:
    """Convert decoded JSON back into token tuples.

    chevron compares tokens against tuples, so lists are not enough.
    """
    tokens: list[Token] = []
    for item in raw:
        if not isinstance(item, list) or len(item) != 2:
            msg = f"Malformed cached token: {item!r}"
            raise ValueError(msg)
        tag, key = item
        tokens.append((str(tag), str(key)))
    return tokens

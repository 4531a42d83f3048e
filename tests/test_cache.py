"""Tests for the tokenized template cache."""

import json
from pathlib import Path

from chevron import ChevronError
import pytest

from mustache_view.cache import TemplateCache
from mustache_view.cache import hash_template

EXPECTED_TOKENS = [("literal", "Hello "), ("variable", "name"), ("literal", "!")]


class TestTemplateCache:
    """Test TemplateCache memory and disk layers."""

    def test_tokenizes_on_miss(self) -> None:
        """Test a new template is tokenized."""
        cache = TemplateCache()
        assert cache.get_tokens("Hello {{name}}!") == EXPECTED_TOKENS
        assert len(cache) == 1

    def test_memory_hit_returns_same_list(self) -> None:
        """Test a repeated template is served from memory."""
        cache = TemplateCache()
        first = cache.get_tokens("Hello {{name}}!")
        assert cache.get_tokens("Hello {{name}}!") is first

    def test_memory_only_writes_nothing(self, tmp_path: Path) -> None:
        """Test a cache without directory is not persistent."""
        cache = TemplateCache()
        cache.get_tokens("Hello {{name}}!")
        assert cache.persistent is False
        assert list(tmp_path.iterdir()) == []

    def test_persists_tokens(self, tmp_path: Path) -> None:
        """Test tokens are written as JSON keyed by the source hash."""
        directory = tmp_path / "mustache"
        cache = TemplateCache(directory)
        cache.get_tokens("Hello {{name}}!")

        cached = directory / f"{hash_template('Hello {{name}}!')}.json"
        assert cached.is_file()
        assert json.loads(cached.read_text()) == [list(t) for t in EXPECTED_TOKENS]
        assert list(directory.glob("*.tmp")) == []

    def test_loads_tokens_from_disk(self, tmp_path: Path) -> None:
        """Test a fresh cache reads tokens written earlier."""
        (tmp_path / f"{hash_template('X')}.json").write_text(
            json.dumps([["literal", "from disk"]])
        )

        cache = TemplateCache(tmp_path)
        tokens = cache.get_tokens("X")

        assert tokens == [("literal", "from disk")]
        assert isinstance(tokens[0], tuple)

    def test_corrupt_file_is_replaced(self, tmp_path: Path) -> None:
        """Test an unreadable cache file is ignored and rewritten."""
        cached = tmp_path / f"{hash_template('Hello {{name}}!')}.json"
        cached.write_text("{not json")

        cache = TemplateCache(tmp_path)
        assert cache.get_tokens("Hello {{name}}!") == EXPECTED_TOKENS
        assert json.loads(cached.read_text()) == [list(t) for t in EXPECTED_TOKENS]

    def test_malformed_token_file_is_replaced(self, tmp_path: Path) -> None:
        """Test cached JSON with the wrong shape is ignored."""
        (tmp_path / f"{hash_template('plain')}.json").write_text('[["only-one"]]')

        cache = TemplateCache(tmp_path)
        assert cache.get_tokens("plain") == [("literal", "plain")]

    def test_clear(self, tmp_path: Path) -> None:
        """Test clear empties memory and disk."""
        cache = TemplateCache(tmp_path)
        cache.get_tokens("a {{b}}")
        cache.get_tokens("c {{d}}")

        cache.clear()

        assert len(cache) == 0
        assert list(tmp_path.glob("*.json")) == []

    def test_clear_missing_directory(self, tmp_path: Path) -> None:
        """Test clear before anything was written."""
        cache = TemplateCache(tmp_path / "never-created")
        cache.clear()
        assert len(cache) == 0

    def test_malformed_template_raises(self, tmp_path: Path) -> None:
        """Test tokenizer errors propagate and nothing is cached."""
        cache = TemplateCache(tmp_path)
        with pytest.raises(ChevronError):
            cache.get_tokens("{{#a}}x{{/b}}")

        assert len(cache) == 0
        assert list(tmp_path.glob("*.json")) == []

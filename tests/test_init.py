"""Tests for the mustache_view package metadata and entry point."""

from pathlib import Path
import tomllib
from unittest.mock import Mock
from unittest.mock import patch

import mustache_view
from mustache_view import ProjectInfo
from mustache_view import get_project_info
from mustache_view.__main__ import main


def test_get_project_info_success():
    """Test get_project_info returns correct values from pyproject.toml."""
    info = get_project_info()

    assert isinstance(info, ProjectInfo)

    project_root_path = Path(__file__).parent.parent
    with (project_root_path / "pyproject.toml").open("rb") as f:
        project_info = tomllib.load(f).get("project", {})
    assert info.version == project_info.get("version", None)
    assert info.description == project_info.get("description", None)


def test_version_matches_project_info():
    """Test the package version comes from pyproject.toml."""
    assert mustache_view.__version__ == get_project_info().version


def test_get_project_info_missing_file():
    """Test get_project_info when pyproject.toml doesn't exist."""
    with patch("mustache_view.project_info.Path") as mock_path:
        mock_pyproject_path = (
            mock_path.return_value.parent.parent.parent.__truediv__.return_value
        )
        mock_pyproject_path.exists.return_value = False

        info = get_project_info()

    assert info.description == "Project description not available"
    assert info.version == "Version not available"


def test_get_project_info_unreadable_file():
    """Test get_project_info when pyproject.toml cannot be opened."""
    with patch("mustache_view.project_info.Path") as mock_path:
        mock_pyproject_path = Mock()
        mock_pyproject_path.exists.return_value = True
        mock_pyproject_path.open.side_effect = OSError("Permission denied")
        mock_path.return_value.parent.parent.parent.__truediv__.return_value = (
            mock_pyproject_path
        )

        info = get_project_info()

    assert "Error reading project info:" in info.description
    assert info.version == "Version not available"


def test_main_prints_version():
    """Test main prints name, version and description."""
    with patch("mustache_view.__main__.get_project_info") as mock_get_info:
        mock_get_info.return_value = ProjectInfo(
            description="Test Description", version="1.0.0"
        )
        with patch("builtins.print") as mock_print:
            main()

    mock_print.assert_any_call("mustache-view v1.0.0: Test Description")
    mock_print.assert_any_call(
        "templates: .mustache (Mustache), .j2 (native); presenters: .py"
    )

"""Project information utilities."""

from pathlib import Path
import tomllib

from pydantic import BaseModel


class ProjectInfo(BaseModel):
    """Project information from pyproject.toml."""

    description: str
    version: str


def get_project_info() -> ProjectInfo:
    """Get project information from pyproject.toml file.

    Returns:
        ProjectInfo: A Pydantic model containing description and version.

    """
    pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"

    if not pyproject_path.exists():
        return ProjectInfo(
            description="Project description not available",
            version="Version not available",
        )

    try:
        with pyproject_path.open("rb") as f:
            project = tomllib.load(f).get("project", {})
    except (OSError, tomllib.TOMLDecodeError) as e:
        return ProjectInfo(
            description=f"Error reading project info: {e}",
            version="Version not available",
        )

    return ProjectInfo(
        description=project.get("description", "Project description not available"),
        version=project.get("version", "Version not available"),
    )

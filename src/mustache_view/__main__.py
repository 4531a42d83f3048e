"""Print the installed mustache-view version and its default view setup."""

from mustache_view.core.config import ViewConfig
from mustache_view.project_info import get_project_info


def main():
    """Print version, description and the default template extensions."""
    info = get_project_info()
    config = ViewConfig()
    print(f"mustache-view v{info.version}: {info.description}")
    print(
        f"templates: {config.ext} (Mustache), {config.native_ext} (native); "
        f"presenters: {config.presenter_ext}"
    )


if __name__ == "__main__":
    main()

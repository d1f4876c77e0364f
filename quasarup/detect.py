"""Project and package manager detection."""

from pathlib import Path

from .errors import NotInProject

PROJECT_MARKERS = (
    "quasar.config.js",
    "quasar.config.mjs",
    "quasar.config.ts",
    "quasar.config.cjs",
    "quasar.conf.js",
)


def find_app_dir(start: Path) -> Path:
    """Find the nearest directory, starting at start, holding a Quasar config.

    Args:
        start: Directory to start searching from

    Returns:
        The project root directory

    Raises:
        NotInProject: If no ancestor holds a Quasar config file
    """
    start = start.resolve()
    for directory in (start, *start.parents):
        if any((directory / marker).exists() for marker in PROJECT_MARKERS):
            return directory

    raise NotInProject("This command must be executed inside a Quasar project folder.")


def identify_packager(app_dir: Path) -> str:
    """Detect the package manager from lockfile presence.

    Returns:
        'yarn' when yarn.lock exists, otherwise 'npm'
    """
    if (app_dir / "yarn.lock").exists():
        return "yarn"
    return "npm"

"""Look up versions of packages installed under node_modules."""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def get_installed_version(app_dir: Path, package_name: str) -> str | None:
    """Return the version of an installed package, or None if missing."""
    pkg_file = app_dir / "node_modules" / package_name / "package.json"
    if not pkg_file.is_file():
        return None

    try:
        data = json.loads(pkg_file.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.debug("Unreadable %s: %s", pkg_file, e)
        return None

    version = data.get("version") if isinstance(data, dict) else None
    return version if isinstance(version, str) else None


class InstalledLookup:
    """Callable bound to one project directory."""

    def __init__(self, app_dir: Path):
        self.app_dir = app_dir

    def __call__(self, package_name: str) -> str | None:
        return get_installed_version(self.app_dir, package_name)

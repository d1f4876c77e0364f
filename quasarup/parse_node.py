"""Node.js package.json parsing."""

import json
from pathlib import Path

from .errors import ManifestError
from .models import DEPENDENCY_GROUPS, Manifest, ManifestEntry


def parse_package_json(content: str) -> Manifest:
    """Parse package.json content into Manifest.

    Args:
        content: The package.json file content

    Returns:
        Parsed Manifest object with dependencies before devDependencies

    Raises:
        ManifestError: If the content is not a JSON object
    """
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ManifestError(f"package.json is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ManifestError("package.json must contain a JSON object")

    entries: list[ManifestEntry] = []
    for group in DEPENDENCY_GROUPS:
        section = data.get(group) or {}
        if not isinstance(section, dict):
            continue
        for name, spec in section.items():
            entries.append(
                ManifestEntry(
                    name=name,
                    spec=spec if isinstance(spec, str) else None,
                    group=group,
                )
            )

    return Manifest(entries=entries)


def read_package_json(app_dir: Path) -> Manifest:
    """Read and parse the package.json of a project directory."""
    path = app_dir / "package.json"
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ManifestError(f"Cannot read {path}: {e}") from e
    return parse_package_json(content)

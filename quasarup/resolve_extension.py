"""Resolve a bare module path to an existing source file."""

import os

EXTENSIONS = ("", ".js", ".ts", ".jsx", ".tsx")


def resolve_extension(path: str | os.PathLike) -> str | None:
    """Return the first existing file among path and its suffixed variants.

    Suffixes are only appended, so a path that already exists is returned
    unchanged.

    Args:
        path: Module path, usually without an extension

    Returns:
        The matching path, or None when no candidate exists
    """
    base = os.fspath(path)
    for ext in EXTENSIONS:
        candidate = base + ext
        if os.path.exists(candidate):
            return candidate
    return None

"""
Directory scanning.

Finds the Ruby source files under a root directory for batch sorting.
"""

import os
from pathlib import Path

from .config import SOURCE_EXTENSIONS
from .sorter import NotFoundError


def normalize_extensions(exts) -> set[str]:
    """Lowercase extensions and make sure each starts with a dot."""
    normalized = set()
    for ext in exts:
        ext = ext.strip().lower()
        if not ext:
            continue
        normalized.add(ext if ext.startswith('.') else f'.{ext}')
    return normalized


def find_source_files(root: Path, extensions: set[str] | None = None) -> list[Path]:
    """
    Recursively find source files under a directory.

    Hidden folders and files (leading dot) are skipped, as are symlinks.

    Args:
        root: The root directory to scan.
        extensions: Extensions to include (default: SOURCE_EXTENSIONS).

    Returns:
        Sorted list of matching file paths.

    Raises:
        NotFoundError: If root is missing or not a directory.
    """
    root = Path(root)
    if not root.is_dir():
        raise NotFoundError(f"Invalid directory: {root}", root)

    wanted = normalize_extensions(extensions if extensions is not None else SOURCE_EXTENSIONS)
    found = []

    for dirpath, dirnames, filenames in os.walk(root):
        # Prune hidden folders (.git, .bundle, ...)
        dirnames[:] = [d for d in dirnames if not d.startswith('.')]

        for filename in filenames:
            if filename.startswith('.'):
                continue

            filepath = Path(dirpath) / filename
            if filepath.is_symlink():
                continue

            if filepath.suffix.lower() in wanted:
                found.append(filepath)

    return sorted(found)

"""
Batch execution for the Ruby import sorter.

Applies a sort mode to one file or to every source file under a directory.
"""

from datetime import datetime
from pathlib import Path

from tqdm import tqdm

from .config import DEFAULT_MODE, SORT_MODES
from .scanner import find_source_files
from .sorter import FileSorter, SortError


def sort_file(path: Path, mode: str = DEFAULT_MODE, dry_run: bool = False) -> bool:
    """
    Sort a single file with the given mode.

    Returns:
        True if the file was (or, in dry-run, would be) rewritten.

    Raises:
        SortError: If the file cannot be read, decoded or written.
        ValueError: If the mode is unknown.
    """
    if mode not in SORT_MODES:
        raise ValueError(f"Unknown sort mode: {mode!r}")

    sorter = FileSorter(path, dry_run=dry_run)
    if mode == "simple":
        return sorter.sort_imports()
    return sorter.sort_and_format_imports()


def sort_directory(
    root: Path,
    mode: str = DEFAULT_MODE,
    dry_run: bool = False,
    extensions: set[str] | None = None,
    show_progress: bool = True
) -> dict:
    """
    Sort every source file under root, one file at a time.

    A file that fails is recorded in the report and the batch carries on.

    Args:
        root: Root directory.
        mode: Sort mode (grouped, simple).
        dry_run: If True, compute results without writing.
        extensions: Extensions to include (default: SOURCE_EXTENSIONS).
        show_progress: Show a tqdm progress bar.

    Returns:
        Report dict with counts, rewritten paths and failures.
    """
    if mode not in SORT_MODES:
        raise ValueError(f"Unknown sort mode: {mode!r}")

    root = Path(root)
    files = find_source_files(root, extensions)

    rewritten: list[str] = []
    failures: list[dict] = []
    unchanged_count = 0

    for path in tqdm(files, unit="file", disable=not show_progress):
        rel_path = path.relative_to(root).as_posix()
        try:
            if sort_file(path, mode, dry_run):
                rewritten.append(rel_path)
            else:
                unchanged_count += 1
        except SortError as e:
            failures.append({"rel_path": rel_path, "error": str(e)})
            tqdm.write(f"[ERROR] {e}")

    return {
        "root": str(root),
        "mode": mode,
        "dry_run": dry_run,
        "executed_at": datetime.now().isoformat(timespec='seconds'),
        "processed_count": len(rewritten) + unchanged_count,
        "rewritten_count": len(rewritten),
        "unchanged_count": unchanged_count,
        "failed_count": len(failures),
        "rewritten": rewritten,
        "failures": failures,
    }

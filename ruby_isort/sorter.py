"""
Import sorting for a single Ruby source file.

Two modes are provided:
- grouped: declarations grouped by kind, leading comments kept with their
  declaration, a blank line between groups, the rest of the file after them
- simple: legacy mode, require/require_relative/include as one sorted block

The transforms work on lists of lines and never touch the filesystem;
FileSorter wraps them with reading and writing.
"""

import os
import re
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path

from .classifier import DeclarationKind, classify, is_comment_or_blank, is_simple_declaration
from .config import DEFAULT_ENCODING, DEFAULT_MODE, SORT_MODES


class SortError(Exception):
    """A file could not be read, decoded or written."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


class NotFoundError(SortError):
    pass


class DecodeError(SortError):
    pass


class IOFailure(SortError):
    pass


@dataclass(frozen=True)
class Entry:
    """
    A declaration line plus the comment/blank lines that led into it.

    Entries are sorted by the declaration only, never by their comments.
    """
    kind: DeclarationKind
    declaration: str
    lead: tuple[str, ...] = ()

    @property
    def lines(self) -> list[str]:
        return [*self.lead, self.declaration]

    @property
    def sort_key(self) -> str:
        return self.declaration.strip()


_LINE_BREAK = re.compile(r"\r?\n")

BOM = "\ufeff"


def split_lines(text: str) -> tuple[list[str], str]:
    """
    Split text into lines without terminators.

    Returns:
        (lines, newline) where newline is "\\r\\n" if the text uses CRLF.
    """
    newline = "\r\n" if "\r\n" in text else "\n"
    lines = _LINE_BREAK.split(text)
    if lines and lines[-1] == "":
        lines.pop()
    return lines, newline


def _strip_blank_edges(lines: list[str], trailing: bool = True) -> list[str]:
    start, end = 0, len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while trailing and end > start and not lines[end - 1].strip():
        end -= 1
    return lines[start:end]


def collect_entries(lines: list[str]) -> tuple[dict[DeclarationKind, list[Entry]], list[str]]:
    """
    Walk the lines once, attaching pending comment/blank lines to the
    declaration that follows them.

    Args:
        lines: File content, one line per item.

    Returns:
        (groups, remainder): entries per kind in file order, and every line
        not claimed by an entry, in original order.
    """
    groups: dict[DeclarationKind, list[Entry]] = {kind: [] for kind in DeclarationKind}
    remainder: list[str] = []
    pending: list[str] = []

    for line in lines:
        kind = classify(line)
        if kind is not None:
            # Blank lines never lead an entry
            lead = _strip_blank_edges(pending, trailing=False)
            groups[kind].append(Entry(kind, line, tuple(lead)))
            pending = []
        elif is_comment_or_blank(line):
            pending.append(line)
        else:
            remainder.extend(pending)
            remainder.append(line)
            pending = []

    remainder.extend(pending)
    return groups, remainder


def format_group(entries: list[Entry]) -> list[str]:
    """Sort entries (stable, case-sensitive) and flatten them, plus one blank line."""
    if not entries:
        return []

    lines = []
    for entry in sorted(entries, key=lambda e: e.sort_key):
        lines.extend(entry.lines)
    lines.append("")
    return lines


def sort_and_format_lines(lines: list[str]) -> list[str] | None:
    """
    Grouped mode transform.

    Args:
        lines: File content, one line per item.

    Returns:
        The reorganized lines, or None if the file has no declarations.
    """
    groups, remainder = collect_entries(lines)
    if not any(groups.values()):
        return None

    output: list[str] = []
    for kind in DeclarationKind:
        output.extend(format_group(groups[kind]))

    while output and not output[-1].strip():
        output.pop()

    remainder = _strip_blank_edges(remainder)
    if remainder:
        output.append("")
        output.extend(remainder)

    return output


def sort_lines_simple(lines: list[str]) -> list[str] | None:
    """Legacy transform: one sorted block of matches, then everything else."""
    lines = [line.replace("\r", "") for line in lines]

    imports = [line for line in lines if is_simple_declaration(line)]
    if not imports:
        return None

    others = [line for line in lines if not is_simple_declaration(line)]
    return sorted(imports) + others


_TRANSFORMS = {
    "grouped": sort_and_format_lines,
    "simple": sort_lines_simple,
}


def format_source(text: str, mode: str = DEFAULT_MODE) -> str:
    """
    Sort the declarations of a whole source text.

    Args:
        text: File content.
        mode: One of SORT_MODES.

    Returns:
        The new content, terminated by exactly one newline. If nothing
        matches, the input is returned as is.

    Raises:
        ValueError: If the mode is unknown.
    """
    if mode not in SORT_MODES:
        raise ValueError(f"Unknown sort mode: {mode!r} (choose from {', '.join(SORT_MODES)})")

    # A byte order mark stays at the very start and is not part of line 1
    bom = BOM if text.startswith(BOM) else ""
    lines, newline = split_lines(text[len(bom):])
    if mode == "simple":
        newline = "\n"

    output = _TRANSFORMS[mode](lines)
    if output is None:
        return text

    return bom + newline.join(output) + newline


class FileSorter:
    """
    Sorts the declarations of one file in place.

    The new content is computed fully in memory before anything is written,
    and the write replaces the file in one step.
    """

    def __init__(self, file_path: Path | str, dry_run: bool = False, encoding: str = DEFAULT_ENCODING):
        self.file_path = Path(file_path)
        self.dry_run = dry_run
        self.encoding = encoding

    def sort_imports(self) -> bool:
        """Simple mode. Returns True if the file was (or would be) rewritten."""
        return self._apply("simple")

    def sort_and_format_imports(self) -> bool:
        """Grouped mode. Returns True if the file was (or would be) rewritten."""
        return self._apply("grouped")

    def _apply(self, mode: str) -> bool:
        original = self._read()
        sorted_content = format_source(original, mode)

        if sorted_content == original:
            return False

        if not self.dry_run:
            self._write(sorted_content)
        return True

    def _read(self) -> str:
        try:
            data = self.file_path.read_bytes()
        except FileNotFoundError as e:
            raise NotFoundError(f"File not found: {self.file_path}", self.file_path) from e
        except OSError as e:
            raise IOFailure(f"Cannot read {self.file_path}: {e}", self.file_path) from e

        try:
            return data.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise DecodeError(f"Not valid {self.encoding} text: {self.file_path} ({e.reason})", self.file_path) from e

    def _write(self, content: str) -> None:
        target = self.file_path.resolve()
        tmp_name = None

        try:
            fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
            with os.fdopen(fd, "w", encoding=self.encoding, newline="") as f:
                f.write(content)
            shutil.copymode(target, tmp_name)
            os.replace(tmp_name, target)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise IOFailure(f"Cannot write {self.file_path}: {e}", self.file_path) from e

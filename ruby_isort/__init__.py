"""
Ruby Import Sorter
==================

A command-line tool that groups, sorts and formats the dependency
declarations (require, require_relative, include, extend, autoload, using)
at the top of Ruby source files.
"""

__version__ = "1.0.0"

from .classifier import DeclarationKind, classify, is_comment_or_blank
from .sorter import (
    Entry,
    FileSorter,
    SortError,
    NotFoundError,
    DecodeError,
    IOFailure,
    format_source,
    sort_and_format_lines,
    sort_lines_simple,
)
from .scanner import find_source_files
from .executor import sort_file, sort_directory

__all__ = [
    "DeclarationKind",
    "classify",
    "is_comment_or_blank",
    "Entry",
    "FileSorter",
    "SortError",
    "NotFoundError",
    "DecodeError",
    "IOFailure",
    "format_source",
    "sort_and_format_lines",
    "sort_lines_simple",
    "find_source_files",
    "sort_file",
    "sort_directory",
]

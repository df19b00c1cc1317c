#!/usr/bin/env python3
"""
Ruby Import Sorter - CLI Entry Point
====================================

Usage:
    python -m ruby_isort -f lib/app.rb
    python -m ruby_isort -d lib --dry-run
    python -m ruby_isort -d lib --mode simple --ext-include rb,rake
"""

import argparse
import sys
from pathlib import Path

from . import __version__
from .config import DEFAULT_MODE, SORT_MODES, get_mode_description
from .executor import sort_directory, sort_file
from .scanner import normalize_extensions
from .sorter import SortError
from .utils import console, print_error, print_header, print_report_table, print_success, print_warning


def cmd_file(args) -> int:
    """File mode - sort one file."""
    try:
        changed = sort_file(args.file, args.mode, args.dry_run)
    except SortError as e:
        print_error(str(e))
        return 1

    if args.dry_run:
        if changed:
            console.print(f"[WOULD SORT] {args.file}", markup=False, highlight=False, soft_wrap=True)
        else:
            console.print(f"[UNCHANGED] {args.file}", markup=False, highlight=False, soft_wrap=True)
        return 0

    print_success(f"Imports sorted in {args.file}")
    return 0


def cmd_directory(args) -> int:
    """Directory mode - sort every source file under a directory."""
    extensions = None
    if args.ext_include:
        extensions = normalize_extensions(args.ext_include.split(','))

    print_header("Ruby Import Sorter", f"Root: {args.directory}\nMode: {args.mode} - {get_mode_description(args.mode)}")

    try:
        report = sort_directory(
            args.directory,
            mode=args.mode,
            dry_run=args.dry_run,
            extensions=extensions,
            show_progress=not args.no_progress,
        )
    except SortError as e:
        print_error(str(e))
        return 1

    console.print(
        f"Sorted imports in {report['processed_count']} files in directory: {args.directory}",
        markup=False,
        highlight=False,
        soft_wrap=True,
    )
    print_report_table(report)

    if args.dry_run:
        print_warning("This was a DRY-RUN. No files were actually modified.")

    return 1 if report["failed_count"] else 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="ruby-isort",
        description="Ruby Import Sorter - group and sort require/include/extend declarations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    target = parser.add_mutually_exclusive_group()
    target.add_argument("-f", "--file", type=Path, help="File to sort")
    target.add_argument("-d", "--directory", type=Path, help="Specify a directory to sort")
    parser.add_argument("--mode", choices=list(SORT_MODES.keys()), default=DEFAULT_MODE,
                        help=f"Sort mode (default: {DEFAULT_MODE})")
    parser.add_argument("--dry-run", action="store_true",
                        help="Report what would change without modifying files")
    parser.add_argument("--ext-include", type=str, metavar="EXTS",
                        help="Extensions to sort in directory mode (comma-separated, default: rb)")
    parser.add_argument("--no-progress", action="store_true",
                        help="Hide the progress bar in directory mode")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    args = parser.parse_args(argv)

    try:
        if args.file:
            return cmd_file(args)
        if args.directory:
            return cmd_directory(args)
    except KeyboardInterrupt:
        print("\n[ABORT] Operation cancelled by user")
        return 130

    console.print("Please specify a file using -f or --file", highlight=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())

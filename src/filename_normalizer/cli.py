"""Command-line interface and main entry point for filename-normalizer."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import RunConfig, load_config
from .renamer import (
    RenameResult,
    RunReport,
    format_report_summary,
    format_result,
    generate_log_filename,
    rename_all,
    write_rename_log,
)
from .scanner import DirectoryAccessError, collect

# Marks "--log-file" given without a value.
_DEFAULT_LOG_FILE = ""


def create_parser() -> argparse.ArgumentParser:
    """Create and return the argument parser."""

    parser = argparse.ArgumentParser(
        prog="filename-normalizer",
        description=(
            "Recursively rename files and directories, substituting a fixed set "
            "of characters, replacing characters the platform forbids with '_' "
            "and removing all spaces. Files are renamed first, then directories "
            "from the deepest up."
        ),
    )
    parser.add_argument(
        "path",
        type=Path,
        nargs="?",
        default=None,
        help="Root directory to process. Default: the platform's built-in root.",
    )
    parser.add_argument(
        "--platform",
        choices=("auto", "windows", "unix"),
        default="auto",
        help="Forbidden-character profile to apply (default: detect the running platform).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        nargs="?",
        const=_DEFAULT_LOG_FILE,
        default=None,
        help=(
            "Write a JSON log of all attempted renames to this file. "
            "Without a value: rename_log_<timestamp>.json in the current directory."
        ),
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=False,
        help="Print a summary with per-entry details at the end of the run.",
    )
    return parser


def print_result(result: RenameResult) -> None:
    """Print one rename outcome: successes to stdout, failures to stderr."""
    if result.success:
        print(format_result(result))
    else:
        print(format_result(result), file=sys.stderr)


def run(config: RunConfig) -> RunReport:
    """Collect every entry under ``config.root`` and normalize their names.

    Raises:
        ValueError: If no root is configured.
        DirectoryAccessError: If the root cannot be opened.
    """
    if config.root is None:
        raise ValueError(f"No root directory for the {config.profile.label} profile")
    inaccessible: list[Path] = []
    files, directories = collect(
        config.root, on_inaccessible=lambda path, _exc: inaccessible.append(path)
    )
    report = rename_all(
        files,
        directories,
        profile=config.profile,
        root=config.root,
        on_result=print_result,
    )
    report.inaccessible.extend(inaccessible)
    return report


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to ``sys.argv[1:]``).

    Returns:
        Exit code: 0 once the batch has run (even with per-entry errors),
        1 if the root directory is missing or cannot be read.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    # Extract typed values from argparse namespace.
    root_arg: Path | None = args.path
    platform: str = args.platform
    log_file_arg: Path | str | None = args.log_file
    verbose: bool = args.verbose

    config = load_config(root_arg, platform)
    print(f"Platform detected: {config.profile.label}")

    if not config.root_exists:
        where = f": {config.root}" if config.root is not None else ""
        print(f"Error: Directory not found{where}", file=sys.stderr)
        return 1

    try:
        report = run(config)
    except DirectoryAccessError as exc:
        print(f"Error accessing directory: {exc}", file=sys.stderr)
        return 1

    if verbose:
        print(format_report_summary(report, verbose=True))

    if log_file_arg is not None:
        log_file = Path(log_file_arg or generate_log_filename())
        write_rename_log(report, log_file)
        print(f"Log written to: {log_file}")

    return 0

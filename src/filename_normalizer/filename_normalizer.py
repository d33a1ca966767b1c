"""Public API — re-exports all public symbols from the package.

The package ``__init__.py`` re-exports everything from here via
``from .filename_normalizer import *``.
"""

from __future__ import annotations

# CLI entry point
from .cli import main

# Configuration — platform profile and root selection
from .config import DEFAULT_ROOTS, RunConfig, load_config, resolve_default_root

# Renamer — orchestration and logging
from .renamer import (
    RenameAction,
    RenameResult,
    RunReport,
    format_report_summary,
    format_result,
    generate_log_filename,
    plan_directory_rename,
    plan_file_rename,
    rename_all,
    rename_entry,
    write_rename_log,
)

# Sanitizer — pure functions and constants
from .sanitizer import (
    SUBSTITUTION_MAP,
    UNIX_FORBIDDEN_CHARS,
    WINDOWS_FORBIDDEN_CHARS,
    PlatformProfile,
    detect_platform,
    is_name_safe,
    remove_spaces,
    replace_forbidden_chars,
    sanitize,
    sanitize_name,
    split_extension,
    substitute_chars,
)

# Scanner — filesystem walking
from .scanner import DirectoryAccessError, EntryKind, collect

# TUI entry point (optional — requires 'tui' extra)
try:
    from .tui import tui_main
except ImportError:

    def tui_main(
        argv: list[str] | None = None,  # pyright: ignore[reportUnusedParameter]
    ) -> int:
        """Stub that prints an install hint when Textual is not available."""
        import sys  # noqa: I001

        print(
            "Error: The TUI requires the 'tui' extra. "
            "Install with: pip install filename-normalizer[tui]",
            file=sys.stderr,
        )
        return 1


__all__ = [
    # CLI
    "main",
    # Configuration
    "DEFAULT_ROOTS",
    "RunConfig",
    "load_config",
    "resolve_default_root",
    # Sanitizer functions
    "sanitize",
    "sanitize_name",
    "is_name_safe",
    "substitute_chars",
    "replace_forbidden_chars",
    "remove_spaces",
    "split_extension",
    "detect_platform",
    # Sanitizer constants and classes
    "PlatformProfile",
    "SUBSTITUTION_MAP",
    "WINDOWS_FORBIDDEN_CHARS",
    "UNIX_FORBIDDEN_CHARS",
    # Scanner
    "EntryKind",
    "DirectoryAccessError",
    "collect",
    # Renamer classes
    "RenameAction",
    "RenameResult",
    "RunReport",
    # Renamer functions
    "rename_all",
    "rename_entry",
    "plan_file_rename",
    "plan_directory_rename",
    "format_result",
    "format_report_summary",
    "generate_log_filename",
    "write_rename_log",
    # TUI
    "tui_main",
]

if __name__ == "__main__":
    raise SystemExit(main())

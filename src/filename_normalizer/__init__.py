__all__ = (  # noqa: F405
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
)

from .filename_normalizer import *  # noqa: F403

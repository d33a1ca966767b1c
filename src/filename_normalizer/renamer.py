"""Rename orchestration, human-readable formatting, and JSON log writing."""

from __future__ import annotations

import itertools
import json
import os
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path

from .sanitizer import PlatformProfile, detect_platform, sanitize_name, split_extension
from .scanner import EntryKind

# Names a normalized entry can never take.
_UNUSABLE_NAMES: frozenset[str] = frozenset({"", ".", ".."})


@dataclass(frozen=True)
class RenameAction:
    """A single planned rename: the entry as found and its normalized path."""

    source: Path
    destination: Path
    kind: EntryKind
    original_name: str
    final_name: str
    issues: tuple[str, ...]

    @property
    def needs_rename(self) -> bool:
        """Return ``True`` if normalizing changed the name, case included."""
        return self.original_name != self.final_name


@dataclass(frozen=True)
class RenameResult:
    """Result of attempting a single rename action."""

    action: RenameAction
    success: bool
    error_message: str | None = None


@dataclass
class RunReport:
    """Outcome of one run over a directory tree."""

    root: Path
    profile: PlatformProfile
    results: list[RenameResult] = field(default_factory=list)
    inaccessible: list[Path] = field(default_factory=list)
    total_entries_scanned: int = 0
    total_unchanged: int = 0

    @property
    def renamed(self) -> list[RenameResult]:
        return [r for r in self.results if r.success]

    @property
    def failed(self) -> list[RenameResult]:
        return [r for r in self.results if not r.success]


def plan_file_rename(path: Path, profile: PlatformProfile) -> RenameAction:
    """Compute the normalized path of a file.

    Only the stem is normalized; the extension is kept verbatim.
    """
    stem, ext = split_extension(path.name)
    new_stem, issues = sanitize_name(stem, profile)
    final_name = new_stem + ext
    return RenameAction(
        source=path,
        destination=_destination(path, final_name),
        kind=EntryKind.FILE,
        original_name=path.name,
        final_name=final_name,
        issues=tuple(issues),
    )


def plan_directory_rename(path: Path, profile: PlatformProfile) -> RenameAction:
    """Compute the normalized path of a directory from its full name."""
    final_name, issues = sanitize_name(path.name, profile)
    return RenameAction(
        source=path,
        destination=_destination(path, final_name),
        kind=EntryKind.DIRECTORY,
        original_name=path.name,
        final_name=final_name,
        issues=tuple(issues),
    )


def rename_entry(action: RenameAction) -> RenameResult:
    """Attempt the rename described by *action* exactly once.

    Before calling ``os.rename``:
      1. Verify the normalized name is usable (not empty, ``.`` or ``..``).
      2. Verify the source still exists.
      3. Verify the destination does not already exist, unless it is the
         source itself seen through a case-insensitive filesystem.

    Errors are returned as a failed ``RenameResult``; nothing is raised.
    """
    if action.final_name in _UNUSABLE_NAMES:
        return RenameResult(
            action=action,
            success=False,
            error_message=f"Normalized name is not usable: {action.final_name!r}",
        )

    if not action.source.exists() and not action.source.is_symlink():
        return RenameResult(
            action=action,
            success=False,
            error_message=f"Source no longer exists: {action.source}",
        )

    if (
        action.destination.exists() or action.destination.is_symlink()
    ) and not _is_case_only_rename(action):
        return RenameResult(
            action=action,
            success=False,
            error_message=f"Destination already exists: {action.destination}",
        )

    try:
        os.rename(action.source, action.destination)
    except OSError as exc:
        return RenameResult(action=action, success=False, error_message=str(exc))
    return RenameResult(action=action, success=True)


def rename_all(
    files: Sequence[Path],
    directories: Sequence[Path],
    *,
    profile: PlatformProfile | None = None,
    root: Path | None = None,
    on_result: Callable[[RenameResult], None] | None = None,
) -> RunReport:
    """Normalize the names of all collected *files* and *directories*.

    Files are processed first, in discovery order.  Directories follow in
    reverse discovery order, deepest first, so that every path still points
    at an existing entry when its turn comes.

    Entries whose name is already normalized are skipped without touching
    the filesystem.  A failure is recorded and the batch continues.

    Args:
        files: File paths in discovery order.
        directories: Directory paths in discovery order.
        profile: Platform profile; defaults to the running platform.
        root: Root the entries were collected from, recorded in the report.
        on_result: Called with each ``RenameResult`` as soon as it is known.

    Returns:
        A ``RunReport`` holding every attempted rename.
    """
    if profile is None:
        profile = detect_platform()
    report = RunReport(
        root=root if root is not None else Path("."),
        profile=profile,
        total_entries_scanned=len(files) + len(directories),
    )

    # Stable sort keeps reverse discovery order among entries of equal depth.
    ordered_dirs = sorted(reversed(directories), key=lambda p: len(p.parts), reverse=True)

    # Generators: each path is computed only when its turn comes.
    actions = itertools.chain(
        (plan_file_rename(path, profile) for path in files),
        (plan_directory_rename(path, profile) for path in ordered_dirs),
    )
    for action in actions:
        if not action.needs_rename and action.final_name not in _UNUSABLE_NAMES:
            report.total_unchanged += 1
            continue
        result = rename_entry(action)
        report.results.append(result)
        if on_result is not None:
            on_result(result)

    return report


def format_result(result: RenameResult) -> str:
    """Format a result as a single console line."""
    if result.success:
        return f"Renamed: {result.action.source} -> {result.action.destination}"
    return f"Error renaming {result.action.source}: {result.error_message}"


def format_report_summary(report: RunReport, *, verbose: bool = False) -> str:
    """Format the run report as a human-readable string.

    In normal mode, shows the counts.  In verbose mode, also lists per-entry
    issues, failures and unreadable directories.
    """
    lines: list[str] = []

    lines.append(
        f"Scanned {report.total_entries_scanned} entries under {report.root} "
        f"({report.profile.label} profile)"
    )
    lines.append(
        f"Done: {len(report.renamed)} renamed, {len(report.failed)} errors, "
        f"{report.total_unchanged} unchanged."
    )

    if not verbose:
        return "\n".join(lines)

    for result in report.results:
        action = result.action
        status = "ok" if result.success else "FAILED"
        lines.append(
            f"  {_kind_label(action.kind)} {action.original_name} -> {action.final_name} "
            f"[{status}]"
        )
        lines.append(f"         in {action.source.parent}")
        for issue in action.issues:
            lines.append(f"         * {issue}")
        if result.error_message:
            lines.append(f"         ! {result.error_message}")

    if report.inaccessible:
        lines.append("")
        lines.append(f"Unreadable directories ({len(report.inaccessible)}):")
        for path in report.inaccessible:
            lines.append(f"  ! {path}")

    return "\n".join(lines)


def write_rename_log(report: RunReport, log_file: Path) -> None:
    """Write a JSON log file recording all attempted renames.

    The log contains a ``renames`` array of successful renames and an
    ``errors`` array of failures, suitable for auditing.
    """
    renames: list[dict[str, str]] = []
    errors: list[dict[str, str]] = []

    for result in report.results:
        if result.success:
            renames.append(
                {
                    "kind": result.action.kind.value,
                    "source": str(result.action.source),
                    "destination": str(result.action.destination),
                }
            )
        else:
            entry: dict[str, str] = {
                "kind": result.action.kind.value,
                "source": str(result.action.source),
            }
            if result.error_message:
                entry["error"] = result.error_message
            errors.append(entry)

    log_data = {
        "timestamp": datetime.now(UTC).isoformat(),
        "root": str(report.root),
        "platform": report.profile.value,
        "total_entries_scanned": report.total_entries_scanned,
        "total_unchanged": report.total_unchanged,
        "total_renames": len(renames),
        "total_errors": len(errors),
        "renames": renames,
        "errors": errors,
        "inaccessible": [str(p) for p in report.inaccessible],
    }

    log_file.parent.mkdir(parents=True, exist_ok=True)
    log_file.write_text(
        json.dumps(log_data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
    )


def generate_log_filename() -> str:
    """Generate a timestamped log filename like ``rename_log_20260209_153045.json``."""
    now = datetime.now(UTC)
    return f"rename_log_{now.strftime('%Y%m%d_%H%M%S')}.json"


def _destination(path: Path, final_name: str) -> Path:
    """Return *path* renamed to *final_name*, or *path* itself if unusable."""
    if final_name in _UNUSABLE_NAMES:
        return path
    return path.with_name(final_name)


def _is_case_only_rename(action: RenameAction) -> bool:
    """Return ``True`` if the destination is the source under another case."""
    if action.source.name.lower() != action.destination.name.lower():
        return False
    try:
        return os.path.samefile(action.source, action.destination)
    except OSError:
        return False


def _kind_label(kind: EntryKind) -> str:
    """Return a short label for display, e.g. ``[dir]`` or ``[file]``."""
    if kind == EntryKind.DIRECTORY:
        return "[dir] "
    return "[file]"

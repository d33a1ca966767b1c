"""Interactive TUI for filename-normalizer (requires the 'tui' extra)."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import ClassVar

from rich.text import Text
from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import (
    Button,
    DataTable,
    Footer,
    Header,
    Label,
    RichLog,
    Static,
)
from textual.widgets.data_table import RowKey

from .config import RunConfig, load_config
from .renamer import RenameResult, RunReport, format_result, rename_all
from .scanner import DirectoryAccessError, EntryKind, collect


def _kind_label(kind: EntryKind) -> str:
    if kind == EntryKind.DIRECTORY:
        return "dir"
    return "file"


class NormalizerApp(App[int]):
    """Interactive TUI that runs the normalization and browses its results."""

    TITLE = "Filename Normalizer"  # pyright: ignore[reportUnannotatedClassAttribute]

    CSS: ClassVar[str] = """
    #settings-bar {
        height: auto;
        padding: 1 2;
        background: $surface;
        align: left middle;
    }

    #settings-bar Label {
        padding: 0 1;
    }

    #settings-bar Button {
        margin: 0 1;
    }

    #content-area {
        height: 1fr;
    }

    #result-table {
        width: 2fr;
    }

    #detail-panel {
        width: 1fr;
        border-left: solid $accent;
        padding: 1 2;
        overflow-y: auto;
    }

    #detail-header {
        text-style: bold;
        margin-bottom: 1;
    }

    #detail-content {
        height: auto;
    }

    #status-area {
        height: 10;
        border-top: solid $accent;
    }

    #log-output {
        height: 1fr;
    }
    """

    BINDINGS = [  # pyright: ignore[reportUnannotatedClassAttribute]
        Binding("q", "quit", "Quit"),
        Binding("r", "run", "Run"),
    ]

    def __init__(self, config: RunConfig) -> None:
        super().__init__()
        self.config: RunConfig = config  # pyright: ignore[reportUnannotatedClassAttribute]
        self.report: RunReport | None = None
        self.row_results: dict[RowKey, RenameResult] = {}

    def compose(self) -> ComposeResult:  # pyright: ignore[reportImplicitOverride]
        yield Header()
        with Vertical():
            with Horizontal(id="settings-bar"):
                yield Label(Text(f"Root: {self.config.root}"), id="root-label")
                yield Label(f"Platform: {self.config.profile.label}", id="platform-label")
                yield Button("Run", id="run-btn", variant="warning")
            with Horizontal(id="content-area"):
                yield DataTable(id="result-table", cursor_type="row")
                with Vertical(id="detail-panel"):
                    yield Static("Select a row to see details", id="detail-header")
                    yield Static("", id="detail-content")
            with Vertical(id="status-area"):
                yield RichLog(id="log-output", max_lines=200, markup=False)
        yield Footer()

    def on_mount(self) -> None:
        table: DataTable[str] = self.query_one(  # pyright: ignore[reportUnknownVariableType]
            "#result-table", DataTable
        )
        table.add_columns("Kind", "Original Name", "Renamed To", "Directory", "Status")

    def action_run(self) -> None:
        run_btn = self.query_one("#run-btn", Button)
        if run_btn.disabled:
            return
        run_btn.disabled = True
        self.run_batch()

    @work(exclusive=True, thread=True)
    def run_batch(self) -> None:
        root = self.config.root
        if root is None:
            return
        inaccessible: list[Path] = []
        try:
            files, directories = collect(
                root, on_inaccessible=lambda path, _exc: inaccessible.append(path)
            )
        except DirectoryAccessError as exc:
            self.call_from_thread(self._write_log, f"Error accessing directory: {exc}")
            return

        report = rename_all(
            files,
            directories,
            profile=self.config.profile,
            root=root,
            on_result=lambda result: self.call_from_thread(self._add_result, result),
        )
        report.inaccessible.extend(inaccessible)
        self.call_from_thread(self._finish, report)

    def _write_log(self, line: str) -> None:
        self.query_one("#log-output", RichLog).write(line)

    def _add_result(self, result: RenameResult) -> None:
        table: DataTable[str] = self.query_one(  # pyright: ignore[reportUnknownVariableType]
            "#result-table", DataTable
        )
        action = result.action
        rel_dir = str(action.source.parent)
        if self.config.root is not None:
            try:
                rel_dir = str(action.source.parent.relative_to(self.config.root))
            except ValueError:
                pass
        row_key = table.add_row(  # pyright: ignore[reportUnknownMemberType]
            _kind_label(action.kind),
            Text(action.original_name),
            Text(action.final_name),
            Text(rel_dir if rel_dir != "." else "(root)"),
            "OK" if result.success else "FAIL",
        )
        self.row_results[row_key] = result
        self._write_log(format_result(result))

    def _finish(self, report: RunReport) -> None:
        self.report = report
        for path in report.inaccessible:
            self._write_log(f"Skipped unreadable directory: {path}")
        self._write_log(
            f"Done: {len(report.renamed)} renamed, {len(report.failed)} errors, "
            f"{report.total_unchanged} unchanged."
        )

    def on_data_table_row_highlighted(self, event: DataTable.RowHighlighted) -> None:
        result = self.row_results.get(event.row_key)
        if result is None:
            return
        action = result.action
        header = self.query_one("#detail-header", Static)
        content = self.query_one("#detail-content", Static)
        header.update(Text(f"[{_kind_label(action.kind)}] {action.original_name}"))
        lines = [
            f"Source:      {action.source}",
            f"Destination: {action.destination}",
            f"Kind:        {action.kind.value}",
        ]
        if result.error_message:
            lines.append(f"Error:       {result.error_message}")
        lines.extend(["", "Changes:"])
        if action.issues:
            for issue in action.issues:
                lines.append(f"  - {issue}")
        else:
            lines.append("  (none)")
        content.update(Text("\n".join(lines)))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "run-btn":
            self.action_run()


def tui_main(argv: list[str] | None = None) -> int:
    """CLI entry point for the TUI."""
    parser = argparse.ArgumentParser(
        prog="filename-normalizer-tui",
        description="Interactive TUI for normalizing file and directory names.",
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
        help="Forbidden-character profile to apply.",
    )
    args = parser.parse_args(argv)

    config = load_config(args.path, args.platform)
    if not config.root_exists:
        where = f": {config.root}" if config.root is not None else ""
        print(f"Error: Directory not found{where}", file=sys.stderr)
        return 1

    app = NormalizerApp(config=config)
    result = app.run()
    return result if result is not None else 0

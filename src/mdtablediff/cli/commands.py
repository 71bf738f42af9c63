"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from mdtablediff.config import Settings, load_config
from mdtablediff.core.columns.resolver import compute_column_diff
from mdtablediff.core.export import build_report, render_report, write_report
from mdtablediff.core.pipeline import run_diff
from mdtablediff.core.tables import find_tables
from mdtablediff.logging import setup_logging


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    setup_logging(json_logs=settings.json_logs, log_level=settings.log_level)
    return settings


def _emit(report: dict, fmt: str, out: Optional[str]) -> None:
    """Write the report to out, or print it."""
    if out:
        path = write_report(report, Path(out), fmt)
        typer.echo(f"Wrote report to {path}")
    else:
        typer.echo(render_report(report, fmt), nl=False)


def tables_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file to scan")],
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    ):
    """List the tables found in a markdown file."""
    settings = _settings(overrides={"parser_config": parser})
    try:
        markdown = Path(path).read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Cannot read {path}", e)

    found = find_tables(markdown, settings.parser_config)
    if not found:
        typer.echo("No tables found.")
        raise typer.Exit(1)
    for t in found:
        typer.echo(
            f"  [{t.index}] lines {t.start_line + 1}-{t.end_line + 1}: "
            f"{len(t.headers)} column(s), {len(t.rows)} row(s) | {', '.join(t.headers)}"
        )


def diff_cmd(
    path: Annotated[str, typer.Argument(help="Current revision of the markdown file")],
    diff: Annotated[Optional[str], typer.Option("--diff", help="Unified diff from the previous revision")] = None,
    old: Annotated[Optional[str], typer.Option("--old", help="Previous revision of the file")] = None,
    new_file: Annotated[bool, typer.Option("--new-file", help="Treat the file as newly added")] = False,
    table: Annotated[Optional[int], typer.Option("--table", help="Only report this table index")] = None,
    fmt: Annotated[Optional[str], typer.Option("--format", help="Output format: json or yaml")] = None,
    out: Annotated[Optional[str], typer.Option("--out", help="Write the report to this file")] = None,
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    ):
    """Report row and column changes for each table in a markdown file."""
    if sum([diff is not None, old is not None, new_file]) > 1:
        _fail("Use only one of --diff, --old, --new-file")
    settings = _settings(overrides={"output_format": fmt, "parser_config": parser})

    try:
        results = run_diff(
            path,
            diff_path=diff,
            old_path=old,
            is_new_file=new_file,
            parser_config=settings.parser_config,
            policy=settings.match_policy(),
        )
    except RuntimeError as e:
        _fail(str(e))

    if table is not None:
        results = [r for r in results if r.table_index == table]
        if not results:
            _fail(f"No table with index {table} in {path}")

    _emit(build_report(path, results), settings.output_format, out)


def headers_cmd(
    old: Annotated[str, typer.Argument(help="Old header row, comma-separated")],
    new: Annotated[str, typer.Argument(help="New header row, comma-separated")],
    fmt: Annotated[Optional[str], typer.Option("--format", help="Output format: json or yaml")] = None,
    ):
    """Compare two header rows and report added, removed, and renamed columns."""
    settings = _settings(overrides={"output_format": fmt})
    old_headers = [h.strip() for h in old.split(',')] if old.strip() else []
    new_headers = [h.strip() for h in new.split(',')] if new.strip() else []
    info = compute_column_diff(old_headers, new_headers, policy=settings.match_policy())
    _emit(info.model_dump(mode='json'), settings.output_format, None)

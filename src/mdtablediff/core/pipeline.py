"""Pipeline step functions: per-table row/column diff orchestration and file loading"""

from pathlib import Path
from typing import Optional

from loguru import logger

from mdtablediff.core.columns.detect import detect_column_diff
from mdtablediff.core.columns.policy import MatchPolicy
from mdtablediff.core.models import TableDiff
from mdtablediff.core.rows import compute_row_diff, new_file_row_diff
from mdtablediff.core.tables import find_tables
from mdtablediff.core.utils.diff import unified_diff


def diff_tables(
    diff_text: str,
    markdown: str,
    parser_config: str = 'gfm-like',
    is_new_file: bool = False,
    policy: Optional[MatchPolicy] = None,
    ) -> list[TableDiff]:
    """Row and column diff for every table in the current markdown.

    diff_text is a unified diff from the previous revision to `markdown`.
    For a new file every data row is reported as added.
    """
    results = []
    for table in find_tables(markdown, parser_config):
        if is_new_file:
            rows = new_file_row_diff(table.rows)
        else:
            rows = compute_row_diff(diff_text, table.start_line, table.end_line, len(table.rows))
        columns = detect_column_diff(
            rows,
            len(table.headers),
            current_headers=table.headers,
            current_rows=table.rows,
            policy=policy,
        )
        results.append(TableDiff(table_index=table.index, rows=rows, columns=columns))
    logger.debug("diffed {} table(s)", len(results))
    return results


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise RuntimeError(f"Failed to read {path}: {e}") from e


def run_diff(
    path: str,
    diff_path: Optional[str] = None,
    old_path: Optional[str] = None,
    is_new_file: bool = False,
    parser_config: str = 'gfm-like',
    policy: Optional[MatchPolicy] = None,
    ) -> list[TableDiff]:
    """Diff the tables of the markdown file at path.

    The diff is read from diff_path, or generated against the previous
    revision at old_path. With neither (and not a new file) nothing changed.
    """
    markdown = _read(Path(path))
    if diff_path:
        diff_text = _read(Path(diff_path))
    elif old_path:
        diff_text = unified_diff(_read(Path(old_path)), markdown, from_label=f"a/{path}", to_label=f"b/{path}")
    else:
        diff_text = ''
    return diff_tables(diff_text, markdown, parser_config, is_new_file, policy)

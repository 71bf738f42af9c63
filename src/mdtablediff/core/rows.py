"""Row-index mapping: file line numbers to table rows, de-duplication, entry point"""

from loguru import logger

from mdtablediff.core.hunks import PlacedEvent, reconcile_hunks
from mdtablediff.core.models import DiffStatus, RowDiff
from mdtablediff.core.parse import parse_unified_diff


# 1-based line to 0-based, then skip the header and separator lines
HEADER_OFFSET = 3
HEADER_ROW = -2


def table_row(line_number: int, table_start_line: int) -> int:
    """Convert a 1-based file line into a row relative to the first data row.

    table_start_line is the 0-based line of the header row.
    """
    return line_number - table_start_line - HEADER_OFFSET


def map_events_to_rows(placed: list[PlacedEvent], table_start_line: int, row_count: int) -> list[RowDiff]:
    """Convert placed events to RowDiffs, keeping rows in [-2, row_count)."""
    rows: list[RowDiff] = []
    for p in placed:
        row = table_row(p.line, table_start_line)
        if not HEADER_ROW <= row < row_count:
            continue
        if p.event.status == DiffStatus.deleted:
            rows.append(RowDiff(
                row=row,
                status=DiffStatus.deleted,
                old_content=p.event.old_content,
                is_deleted_row=True,
            ))
        else:
            rows.append(RowDiff(row=row, status=p.event.status, new_content=p.event.new_content))
    return rows


def _dedupe_key(d: RowDiff) -> tuple:
    if d.status == DiffStatus.deleted:
        return d.row, d.status, d.old_content
    return d.row, d.status


def dedupe_row_diffs(rows: list[RowDiff]) -> list[RowDiff]:
    """Drop repeated row diffs, keeping the first.

    Deleted rows are only duplicates when their old_content matches too, so
    distinct deletions anchored to the same row survive.
    """
    seen: set[tuple] = set()
    unique: list[RowDiff] = []
    for d in rows:
        key = _dedupe_key(d)
        if key in seen:
            continue
        seen.add(key)
        unique.append(d)
    return unique


def compute_row_diff(
    diff_text: str,
    table_start_line: int,
    table_end_line: int,
    row_count: int,
    ) -> list[RowDiff]:
    """Row-level diff for one table: parse, reconcile hunks, map, de-duplicate.

    table_start_line/table_end_line are 0-based lines of the header row and the
    last table row; row_count is the number of data rows in the current table.
    """
    events = parse_unified_diff(diff_text)
    if not events:
        return []
    rows = dedupe_row_diffs(map_events_to_rows(reconcile_hunks(events), table_start_line, row_count))
    logger.debug(
        "table lines {}-{}: {} of {} line events map to rows",
        table_start_line, table_end_line, len(rows), len(events),
    )
    return rows


def new_file_row_diff(rows: list[list[str]]) -> list[RowDiff]:
    """Row diff for a file with no committed revision: every data row is added."""
    return [
        RowDiff(row=i, status=DiffStatus.added, new_content='| ' + ' | '.join(cells) + ' |')
        for i, cells in enumerate(rows)
    ]

"""Column change detection from a table's row diff"""

from typing import Optional, Sequence

from loguru import logger

from mdtablediff.core.columns.policy import MatchPolicy
from mdtablediff.core.columns.resolver import compute_column_diff, fallback_column_diff
from mdtablediff.core.models import ColumnDiffInfo, DiffStatus, RowDiff
from mdtablediff.core.rows import HEADER_ROW
from mdtablediff.core.utils.cells import count_table_cells, is_separator_row, tokenize_row


def _old_headers(deleted: list[RowDiff]) -> list[str]:
    for d in deleted:
        if d.row == HEADER_ROW and d.old_content and not is_separator_row(d.old_content):
            return tokenize_row(d.old_content)
    return []


def _new_headers(added: list[RowDiff]) -> list[str]:
    for d in added:
        if d.row == HEADER_ROW and d.new_content and not is_separator_row(d.new_content):
            return tokenize_row(d.new_content)
    return []


def _old_column_count(deleted: list[RowDiff], fallback: int) -> int:
    for d in deleted:
        if d.row >= 0 and d.old_content:
            return count_table_cells(d.old_content)
    for d in deleted:
        if d.row == HEADER_ROW and d.old_content:
            return count_table_cells(d.old_content)
    return fallback


def detect_column_diff(
    row_diffs: Sequence[RowDiff],
    current_column_count: int,
    current_headers: Optional[Sequence[str]] = None,
    current_rows: Optional[Sequence[Sequence[str]]] = None,
    policy: Optional[MatchPolicy] = None,
    ) -> ColumnDiffInfo:
    """Infer column changes for one table from its row diff.

    Old headers come from the deleted header row. New headers come from the
    added header row, or from the current table when only the old side changed.
    Without headers on both sides a tail-only guess based on cell counts is used.
    """
    if not row_diffs:
        return ColumnDiffInfo(
            old_column_count=current_column_count,
            new_column_count=current_column_count,
            old_headers=list(current_headers or []),
            new_headers=list(current_headers or []),
            mapping=list(range(max(current_column_count, 0))),
        )

    deleted = [d for d in row_diffs if d.status == DiffStatus.deleted]
    added = [d for d in row_diffs if d.status == DiffStatus.added]

    old_headers = _old_headers(deleted)
    new_headers = _new_headers(added)
    if not new_headers and old_headers and current_headers:
        new_headers = list(current_headers)

    if old_headers and new_headers:
        old_rows = [tokenize_row(d.old_content) for d in deleted if d.row >= 0 and d.old_content]
        if current_rows is not None:
            new_rows = [list(r) for r in current_rows]
        else:
            new_rows = [tokenize_row(d.new_content) for d in added if d.row >= 0 and d.new_content]
        return compute_column_diff(old_headers, new_headers, old_rows, new_rows, policy)

    old_count = _old_column_count(deleted, current_column_count)
    logger.debug("headers missing on one side; fallback {} -> {} columns", old_count, current_column_count)
    return fallback_column_diff(
        old_count,
        current_column_count,
        old_headers=old_headers,
        new_headers=current_headers,
        policy=policy,
    )

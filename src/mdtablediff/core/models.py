"""Data models for line events, row diffs, and column diffs"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class DiffStatus(str, Enum):
    """Row-level diff status; a modification is a deleted + added pair."""
    unchanged = "unchanged"
    added = "added"
    deleted = "deleted"


class ColumnChangeKind(str, Enum):
    added = "added"
    removed = "removed"
    renamed = "renamed"


class ChangeKind(str, Enum):
    """Overall classification of a column diff."""
    added = "added"
    removed = "removed"
    mixed = "mixed"
    none = "none"


class LineEvent(BaseModel):
    """A single +/- line from a unified diff hunk."""
    model_config = ConfigDict(frozen=True)

    line_number: int                        # new-file line for added, old-file line for deleted (1-based)
    status: DiffStatus
    old_line_number: Optional[int] = None   # deleted only
    old_content: Optional[str] = None       # deleted only
    new_content: Optional[str] = None       # added only
    hunk_id: int


class RowDiff(BaseModel):
    """Diff state of one table row; row 0 is the first data row, -2 the header."""
    row: int
    status: DiffStatus
    old_content: Optional[str] = None
    new_content: Optional[str] = None
    is_deleted_row: bool = False            # ghost row with no live counterpart


class ColumnPositionChange(BaseModel):
    index: int
    kind: ColumnChangeKind
    header: Optional[str] = None
    confidence: float = Field(..., ge=0.0, le=1.0)
    old_index: Optional[int] = None
    new_index: Optional[int] = None


class ColumnDiffInfo(BaseModel):
    """Column-level changes between the old and new header rows.

    mapping[i] is the new index of old column i, or -1 when it was removed.
    heuristics is a human-readable trace of which rules fired.
    """
    old_column_count: int
    new_column_count: int
    added_columns: list[int] = Field(default_factory=list)
    deleted_columns: list[int] = Field(default_factory=list)
    old_headers: list[str] = Field(default_factory=list)
    new_headers: list[str] = Field(default_factory=list)
    change_kind: ChangeKind = ChangeKind.none
    positions: list[ColumnPositionChange] = Field(default_factory=list)
    mapping: list[int] = Field(default_factory=list)
    heuristics: list[str] = Field(default_factory=list)


class TableBlock(BaseModel):
    """A Markdown table located in a document; lines are 0-based."""
    index: int
    start_line: int                         # header line
    end_line: int                           # last row line, inclusive
    headers: list[str]
    rows: list[list[str]] = Field(default_factory=list)
    alignment: list[str] = Field(default_factory=list)


class TableDiff(BaseModel):
    """Row and column diff results for one table."""
    table_index: int
    rows: list[RowDiff] = Field(default_factory=list)
    columns: ColumnDiffInfo

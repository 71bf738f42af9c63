"""Unit tests for core/parse.py"""

import pytest

from mdtablediff.core.models import DiffStatus
from mdtablediff.core.parse import parse_unified_diff


GIT_DIFF = """\
diff --git a/t.md b/t.md
index 1111111..2222222 100644
--- a/t.md
+++ b/t.md
@@ -4,2 +4,3 @@
 | keep | row |
-| old | row |
+| new | row |
+| extra | row |
"""


def test_parse_git_diff_events():
    """Context lines advance both counters; +/- lines become events in order."""
    events = parse_unified_diff(GIT_DIFF)
    assert [(e.status, e.line_number) for e in events] == [
        (DiffStatus.deleted, 5),
        (DiffStatus.added, 5),
        (DiffStatus.added, 6),
    ]
    assert events[0].old_content == "| old | row |"
    assert events[0].old_line_number == 5
    assert events[1].new_content == "| new | row |"
    assert events[1].old_content is None
    assert {e.hunk_id for e in events} == {1}


@pytest.mark.parametrize("text", ["", "no hunks here\n", "--- a\n+++ b\n", None])
def test_parse_without_hunks_is_empty(text):
    assert parse_unified_diff(text) == []


def test_parse_pure_deletion():
    events = parse_unified_diff("@@ -3,1 +3,0 @@\n-foo")
    assert len(events) == 1
    assert events[0].status == DiffStatus.deleted
    assert events[0].line_number == 3
    assert events[0].old_content == "foo"


def test_parse_pure_addition():
    events = parse_unified_diff("@@ -3,0 +3,1 @@\n+bar")
    assert len(events) == 1
    assert events[0].status == DiffStatus.added
    assert events[0].line_number == 3
    assert events[0].new_content == "bar"


def test_parse_hunk_ids_increment():
    text = "@@ -1 +1 @@\n-a\n+b\n@@ -10 +10 @@\n-c\n+d\n"
    events = parse_unified_diff(text)
    assert [e.hunk_id for e in events] == [1, 1, 2, 2]
    assert events[2].line_number == 10


def test_parse_skips_no_newline_marker():
    text = "@@ -1 +1 @@\n-a\n\\ No newline at end of file\n+b\n"
    events = parse_unified_diff(text)
    assert [e.status for e in events] == [DiffStatus.deleted, DiffStatus.added]


def test_parse_strips_carriage_return():
    events = parse_unified_diff("@@ -1 +1 @@\r\n-a\r\n+b\r\n")
    assert events[0].old_content == "a"
    assert events[1].new_content == "b"


def test_parse_second_file_headers_not_events():
    """File header lines of a following file are not read as +/- lines."""
    text = GIT_DIFF + "diff --git a/u.md b/u.md\n--- a/u.md\n+++ b/u.md\n@@ -1 +1 @@\n-x\n+y\n"
    events = parse_unified_diff(text)
    assert len(events) == 5
    assert events[-1].hunk_id == 2
    assert events[-1].new_content == "y"


def test_parse_events_are_frozen():
    event = parse_unified_diff("@@ -1 +1 @@\n+a\n")[0]
    with pytest.raises(Exception):
        event.line_number = 99


def test_parse_whitespace_context_line_advances_counters():
    """A line holding a single space is context, not a blank line to skip."""
    events = parse_unified_diff("@@ -1,2 +1,2 @@\n \n-a\n+b\n")
    assert [(e.status, e.line_number) for e in events] == [
        (DiffStatus.deleted, 2),
        (DiffStatus.added, 2),
    ]


def test_parse_deleted_dash_row_is_content():
    """Rows starting with dashes inside a hunk are events, not file headers."""
    events = parse_unified_diff("@@ -4,2 +4 @@\n---- | ---\n-| a | b |\n++++ | +++\n")
    assert [(e.status, e.line_number) for e in events] == [
        (DiffStatus.deleted, 4),
        (DiffStatus.deleted, 5),
        (DiffStatus.added, 4),
    ]
    assert events[0].old_content == "--- | ---"
    assert events[2].new_content == "+++ | +++"


def test_parse_file_headers_after_finished_hunk():
    """Without a diff --git line, ---/+++ after a complete hunk start the next file."""
    text = "@@ -1 +1 @@\n-a\n+b\n--- a/u.md\n+++ b/u.md\n@@ -7 +7 @@\n-x\n+y\n"
    events = parse_unified_diff(text)
    assert [e.old_content or e.new_content for e in events] == ["a", "b", "x", "y"]
    assert events[2].line_number == 7

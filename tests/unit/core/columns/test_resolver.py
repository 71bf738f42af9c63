"""Unit tests for core/columns/resolver.py"""

import pytest

from mdtablediff.core.columns.policy import MatchPolicy
from mdtablediff.core.columns.resolver import compute_column_diff, fallback_column_diff
from mdtablediff.core.models import ChangeKind, ColumnChangeKind


def test_exact_match_all():
    info = compute_column_diff(["Name", "Age"], [" name ", "AGE"])
    assert info.mapping == [0, 1]
    assert info.change_kind == ChangeKind.none
    assert info.heuristics == ["exact_match_all"]
    assert info.positions == []


def test_exact_match_empty_tables():
    info = compute_column_diff([], [])
    assert info.mapping == []
    assert info.heuristics == ["exact_match_all"]


def test_column_inserted_mid_table():
    old = ["A", "B", "C"]
    new = ["A", "X", "B", "C"]
    old_rows = [["1", "b1", "c1"], ["2", "b2", "c2"]]
    new_rows = [["1", "x1", "b1", "c1"], ["2", "x2", "b2", "c2"]]
    info = compute_column_diff(old, new, old_rows, new_rows)
    assert info.added_columns == [1]
    assert info.deleted_columns == []
    assert info.mapping == [0, 2, 3]
    assert info.change_kind == ChangeKind.added
    assert info.heuristics[0] == "sampling:old_rows=2,new_rows=2"
    assert [p.kind for p in info.positions] == [ColumnChangeKind.added]
    assert info.positions[0].header == "X"
    assert info.positions[0].confidence == pytest.approx(0.85)


def test_column_inserted_without_data():
    info = compute_column_diff(["A", "B", "C"], ["A", "X", "B", "C"])
    assert info.mapping == [0, 2, 3]
    assert info.heuristics == ["exact_match:0->0", "exact_match:1->2", "exact_match:2->3"]


def test_column_removed():
    info = compute_column_diff(["A", "B", "C"], ["A", "C"])
    assert info.mapping == [0, -1, 1]
    assert info.deleted_columns == [1]
    assert info.change_kind == ChangeKind.removed
    assert info.positions[0].kind == ColumnChangeKind.removed
    assert info.positions[0].header == "B"
    assert info.positions[0].old_index == 1


def test_mixed_change():
    info = compute_column_diff(["A", "B"], ["A", "C", "D"])
    assert info.mapping == [0, -1]
    assert info.deleted_columns == [1]
    assert info.added_columns == [1, 2]
    assert info.change_kind == ChangeKind.mixed


def test_swapped_columns():
    info = compute_column_diff(["A", "B"], ["B", "A"])
    assert info.mapping == [1, 0]
    assert info.change_kind == ChangeKind.none
    assert info.positions == []
    assert info.heuristics == ["exact_match:0->1", "exact_match:1->0"]


def test_same_width_rename_uses_positional_fallback():
    info = compute_column_diff(["Name", "Age"], ["Full Name", "Age"])
    assert info.mapping == [0, 1]
    assert info.change_kind == ChangeKind.none
    assert info.heuristics == ["exact_match:1->1", "positional_fallback:0->0"]
    assert len(info.positions) == 1
    rename = info.positions[0]
    assert rename.kind == ColumnChangeKind.renamed
    assert rename.header == "Full Name"
    assert (rename.old_index, rename.new_index) == (0, 0)
    assert rename.confidence == pytest.approx(0.55 * (4 / 9) + 0.08)


def test_same_width_all_different_is_full_bijection():
    info = compute_column_diff(["A", "B", "C"], ["X", "Y", "Z"])
    assert info.mapping == [0, 1, 2]
    assert info.added_columns == [] and info.deleted_columns == []
    assert [p.kind for p in info.positions] == [ColumnChangeKind.renamed] * 3


def test_rename_detected_through_data_overlap():
    old = ["Name", "Price"]
    new = ["Item Name", "Count", "Price"]
    old_rows = [["apple", "1"], ["pear", "2"]]
    new_rows = [["apple", "5", "1"], ["pear", "6", "2"]]
    info = compute_column_diff(old, new, old_rows, new_rows)
    assert info.mapping == [0, 2]
    assert info.added_columns == [1]
    assert info.heuristics == ["sampling:old_rows=2,new_rows=2", "exact_match:1->2", "fuzzy_match:0->0"]
    kinds = {p.kind: p for p in info.positions}
    assert kinds[ColumnChangeKind.added].index == 1
    assert kinds[ColumnChangeKind.renamed].confidence == pytest.approx(0.55 * (4 / 9) + 0.45 + 0.08)


def test_sampling_heuristic_with_one_side():
    info = compute_column_diff(["A"], ["A", "B"], old_data_rows=[["1"], ["2"], ["3"]])
    assert info.heuristics[0] == "sampling:old_rows=3,new_rows=0"


def test_stricter_threshold_leaves_columns_unmatched():
    policy = MatchPolicy(match_threshold=0.9)
    info = compute_column_diff(["A", "B"], ["A", "B", "C"], policy=policy)
    assert info.mapping == [-1, -1]
    assert info.change_kind == ChangeKind.mixed


@pytest.mark.parametrize("old, new", [
    (["A", "B", "C"], ["A", "X", "B", "C"]),
    (["a", "a", "b"], ["a", "b", "a"]),
    (["x", "y"], ["z"]),
    (["one", "two", "three"], ["three", "two", "one", "four"]),
])
def test_mapping_is_injective(old, new):
    info = compute_column_diff(old, new)
    image = [j for j in info.mapping if j != -1]
    assert len(image) == len(set(image))
    assert len(info.mapping) == len(old)
    assert not set(info.added_columns) & set(image)
    assert all(info.mapping[i] == -1 for i in info.deleted_columns)


def test_compute_column_diff_idempotent():
    args = (["Name", "Qty"], ["Qty", "Label", "Name"], [["a", "1"]], [["1", "x", "a"]])
    assert compute_column_diff(*args) == compute_column_diff(*args)


def test_fallback_columns_added_at_tail():
    info = fallback_column_diff(2, 4, new_headers=["a", "b", "c", "d"])
    assert info.added_columns == [2, 3]
    assert info.mapping == [0, 1]
    assert info.change_kind == ChangeKind.added
    assert info.heuristics == ["fallback_simple"]
    assert [p.header for p in info.positions] == ["c", "d"]
    assert all(p.confidence == pytest.approx(0.5) for p in info.positions)


def test_fallback_columns_removed_at_tail():
    info = fallback_column_diff(4, 2)
    assert info.deleted_columns == [2, 3]
    assert info.mapping == [0, 1, -1, -1]
    assert info.change_kind == ChangeKind.removed
    assert info.positions[0].header is None


def test_fallback_same_width():
    info = fallback_column_diff(3, 3)
    assert info.change_kind == ChangeKind.none
    assert info.mapping == [0, 1, 2]
    assert info.positions == []

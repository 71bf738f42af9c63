"""Column diff resolution: greedy fuzzy matching of old to new header columns"""

from typing import Optional, Sequence

from loguru import logger

from mdtablediff.core.columns.policy import DEFAULT_POLICY, MatchPolicy
from mdtablediff.core.columns.sampling import build_column_samples
from mdtablediff.core.columns.scoring import ColumnCandidate, score_candidates
from mdtablediff.core.models import (
    ChangeKind,
    ColumnChangeKind,
    ColumnDiffInfo,
    ColumnPositionChange,
)
from mdtablediff.core.utils.cells import normalize_header


def classify_change(added: list[int], deleted: list[int]) -> ChangeKind:
    if added and deleted:
        return ChangeKind.mixed
    if added:
        return ChangeKind.added
    if deleted:
        return ChangeKind.removed
    return ChangeKind.none


def _greedy_match(
    candidates: list[ColumnCandidate],
    threshold: float,
    ) -> list[ColumnCandidate]:
    """Accept candidates at or above threshold, best first, one per old and new column."""
    used_old: set[int] = set()
    used_new: set[int] = set()
    accepted: list[ColumnCandidate] = []
    for c in candidates:
        if c.adjusted < threshold:
            break
        if c.old_index in used_old or c.new_index in used_new:
            continue
        used_old.add(c.old_index)
        used_new.add(c.new_index)
        accepted.append(c)
    return accepted


def _positional_fill(
    candidates: list[ColumnCandidate],
    accepted: list[ColumnCandidate],
    old_count: int,
    ) -> list[ColumnCandidate]:
    """Force every unmatched old column onto its best remaining new column."""
    used_old = {c.old_index for c in accepted}
    used_new = {c.new_index for c in accepted}
    forced: list[ColumnCandidate] = []
    for i in range(old_count):
        if i in used_old:
            continue
        for c in candidates:
            if c.old_index == i and c.new_index not in used_new:
                used_old.add(i)
                used_new.add(c.new_index)
                forced.append(c)
                break
    return forced


def compute_column_diff(
    old_headers: Sequence[str],
    new_headers: Sequence[str],
    old_data_rows: Optional[Sequence[Sequence[str]]] = None,
    new_data_rows: Optional[Sequence[Sequence[str]]] = None,
    policy: Optional[MatchPolicy] = None,
    ) -> ColumnDiffInfo:
    """Detect inserted, removed, and renamed columns between two header rows.

    Header similarity, overlap of sampled cell values, and positional
    proximity are combined into one score per (old, new) pair; pairs are
    accepted greedily, best first. Same-width tables always map fully.
    Never raises on malformed input.
    """
    policy = policy or DEFAULT_POLICY
    old_headers = list(old_headers or [])
    new_headers = list(new_headers or [])
    old_n, new_n = len(old_headers), len(new_headers)

    old_norm = [normalize_header(h) for h in old_headers]
    new_norm = [normalize_header(h) for h in new_headers]

    if old_n == new_n and old_norm == new_norm:
        return ColumnDiffInfo(
            old_column_count=old_n,
            new_column_count=new_n,
            old_headers=old_headers,
            new_headers=new_headers,
            change_kind=ChangeKind.none,
            mapping=list(range(old_n)),
            heuristics=["exact_match_all"],
        )

    heuristics: list[str] = []
    old_samples = build_column_samples(old_data_rows, old_n, policy)
    new_samples = build_column_samples(new_data_rows, new_n, policy)
    if old_samples.sampled_rows or new_samples.sampled_rows:
        heuristics.append(f"sampling:old_rows={old_samples.sampled_rows},new_rows={new_samples.sampled_rows}")

    candidates = score_candidates(old_headers, new_headers, old_samples.values, new_samples.values, policy)
    accepted = _greedy_match(candidates, policy.match_threshold)
    for c in accepted:
        rule = "exact_match" if old_norm[c.old_index] == new_norm[c.new_index] else "fuzzy_match"
        heuristics.append(f"{rule}:{c.old_index}->{c.new_index}")

    if old_n == new_n:
        forced = _positional_fill(candidates, accepted, old_n)
        for c in forced:
            heuristics.append(f"positional_fallback:{c.old_index}->{c.new_index}")
        accepted = accepted + forced

    mapping = [-1] * old_n
    matches: dict[int, ColumnCandidate] = {}
    for c in accepted:
        mapping[c.old_index] = c.new_index
        matches[c.old_index] = c

    matched_new = set(mapping) - {-1}
    deleted = [i for i in range(old_n) if mapping[i] == -1]
    added = [j for j in range(new_n) if j not in matched_new]

    positions: list[ColumnPositionChange] = []
    for i in deleted:
        positions.append(ColumnPositionChange(
            index=i,
            kind=ColumnChangeKind.removed,
            header=old_headers[i],
            confidence=policy.added_removed_confidence,
            old_index=i,
        ))
    for j in added:
        positions.append(ColumnPositionChange(
            index=j,
            kind=ColumnChangeKind.added,
            header=new_headers[j],
            confidence=policy.added_removed_confidence,
            new_index=j,
        ))
    for i in sorted(matches):
        c = matches[i]
        if old_norm[i] == new_norm[c.new_index]:
            continue
        positions.append(ColumnPositionChange(
            index=c.new_index,
            kind=ColumnChangeKind.renamed,
            header=new_headers[c.new_index],
            confidence=c.adjusted,
            old_index=i,
            new_index=c.new_index,
        ))

    change_kind = classify_change(added, deleted)
    logger.debug(
        "column diff {}->{}: kind={} added={} deleted={} mapping={}",
        old_n, new_n, change_kind.value, added, deleted, mapping,
    )
    return ColumnDiffInfo(
        old_column_count=old_n,
        new_column_count=new_n,
        added_columns=added,
        deleted_columns=deleted,
        old_headers=old_headers,
        new_headers=new_headers,
        change_kind=change_kind,
        positions=positions,
        mapping=mapping,
        heuristics=heuristics,
    )


def fallback_column_diff(
    old_column_count: int,
    new_column_count: int,
    old_headers: Optional[Sequence[str]] = None,
    new_headers: Optional[Sequence[str]] = None,
    policy: Optional[MatchPolicy] = None,
    ) -> ColumnDiffInfo:
    """Position-only guess used when headers are missing on one side.

    A wider table is assumed to have gained columns at the tail, a narrower
    one to have lost them from the tail.
    """
    policy = policy or DEFAULT_POLICY
    old_n = max(old_column_count, 0)
    new_n = max(new_column_count, 0)
    old_headers = list(old_headers or [])
    new_headers = list(new_headers or [])

    added = list(range(old_n, new_n))
    deleted = list(range(new_n, old_n))
    mapping = [i if i < new_n else -1 for i in range(old_n)]

    positions = [
        ColumnPositionChange(
            index=i,
            kind=ColumnChangeKind.removed,
            header=old_headers[i] if i < len(old_headers) else None,
            confidence=policy.fallback_confidence,
            old_index=i,
        )
        for i in deleted
    ] + [
        ColumnPositionChange(
            index=j,
            kind=ColumnChangeKind.added,
            header=new_headers[j] if j < len(new_headers) else None,
            confidence=policy.fallback_confidence,
            new_index=j,
        )
        for j in added
    ]

    logger.debug("fallback column diff {}->{}: added={} deleted={}", old_n, new_n, added, deleted)
    return ColumnDiffInfo(
        old_column_count=old_n,
        new_column_count=new_n,
        added_columns=added,
        deleted_columns=deleted,
        old_headers=old_headers,
        new_headers=new_headers,
        change_kind=classify_change(added, deleted),
        positions=positions,
        mapping=mapping,
        heuristics=["fallback_simple"],
    )

"""Bounded per-column value samples used for data-overlap scoring"""

from dataclasses import dataclass, field
from typing import Optional, Sequence

from mdtablediff.core.columns.policy import DEFAULT_POLICY, MatchPolicy
from mdtablediff.core.utils.cells import normalize_header


@dataclass
class ColumnSamples:
    values: list[list[str]] = field(default_factory=list)   # one list per column
    sampled_rows: int = 0


def sample_indices(n: int, limit: int) -> list[int]:
    """Evenly spaced row indices, at most `limit` of them."""
    k = min(limit, n)
    return [i * n // k for i in range(k)]


def build_column_samples(
    rows: Optional[Sequence[Sequence[str]]],
    column_count: int,
    policy: MatchPolicy = DEFAULT_POLICY,
    ) -> ColumnSamples:
    """Collect normalized, de-duplicated, non-empty values for each column.

    Missing cells in short rows count as empty and are skipped.
    """
    samples = ColumnSamples(values=[[] for _ in range(max(column_count, 0))])
    if not rows:
        return samples

    indices = sample_indices(len(rows), policy.max_sample_rows)
    seen: list[set[str]] = [set() for _ in range(len(samples.values))]
    for idx in indices:
        row = rows[idx]
        for col, bucket in enumerate(samples.values):
            if len(bucket) >= policy.max_sample_values:
                continue
            value = normalize_header(row[col]) if col < len(row) else ''
            if not value or value in seen[col]:
                continue
            seen[col].add(value)
            bucket.append(value)

    samples.sampled_rows = len(indices)
    return samples

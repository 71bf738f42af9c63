"""Pairwise column match scoring"""

from dataclasses import dataclass

from mdtablediff.core.columns.policy import DEFAULT_POLICY, MatchPolicy
from mdtablediff.core.utils.cells import normalize_header
from mdtablediff.core.utils.similarity import jaccard, similarity


@dataclass(frozen=True)
class ColumnCandidate:
    old_index: int
    new_index: int
    header_score: float
    data_score: float
    combined: float
    adjusted: float
    distance: int


def score_pair(
    old_index: int,
    new_index: int,
    old_header: str,
    new_header: str,
    old_samples: list[str],
    new_samples: list[str],
    old_count: int,
    new_count: int,
    policy: MatchPolicy = DEFAULT_POLICY,
    ) -> ColumnCandidate:
    """Score one (old, new) column pair: weighted header/data score plus a proximity bonus."""
    header_score = similarity(normalize_header(old_header), normalize_header(new_header))
    data_score = jaccard(old_samples, new_samples)
    combined = policy.header_weight * header_score + policy.data_weight * data_score

    distance = abs(old_index - new_index)
    max_dim = max(1, max(old_count, new_count) - 1)
    pos_bonus = 1 - min(distance / max_dim, 1)
    adjusted = min(1.0, combined + policy.position_bonus * pos_bonus)

    return ColumnCandidate(
        old_index=old_index,
        new_index=new_index,
        header_score=header_score,
        data_score=data_score,
        combined=combined,
        adjusted=adjusted,
        distance=distance,
    )


def score_candidates(
    old_headers: list[str],
    new_headers: list[str],
    old_samples: list[list[str]],
    new_samples: list[list[str]],
    policy: MatchPolicy = DEFAULT_POLICY,
    ) -> list[ColumnCandidate]:
    """Score every pair, best first: adjusted descending, then distance ascending."""
    old_n, new_n = len(old_headers), len(new_headers)
    candidates = [
        score_pair(
            i, j, old_headers[i], new_headers[j],
            old_samples[i] if i < len(old_samples) else [],
            new_samples[j] if j < len(new_samples) else [],
            old_n, new_n, policy,
        )
        for i in range(old_n)
        for j in range(new_n)
    ]
    candidates.sort(key=lambda c: (-c.adjusted, c.distance))
    return candidates

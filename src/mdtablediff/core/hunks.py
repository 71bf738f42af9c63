"""Hunk reconciliation: pair deleted/added lines into display order"""

from dataclasses import dataclass

from mdtablediff.core.models import DiffStatus, LineEvent


@dataclass(frozen=True)
class PlacedEvent:
    """A line event anchored to the file line used to compute its table row."""
    event: LineEvent
    line: int


def _group_by_hunk(events: list[LineEvent]) -> dict[int, tuple[list[LineEvent], list[LineEvent]]]:
    """Return {hunk_id: (deleted, added)} in first-appearance order."""
    groups: dict[int, tuple[list[LineEvent], list[LineEvent]]] = {}
    for ev in events:
        deleted, added = groups.setdefault(ev.hunk_id, ([], []))
        if ev.status == DiffStatus.deleted:
            deleted.append(ev)
        elif ev.status == DiffStatus.added:
            added.append(ev)
    return groups


def reconcile_hunks(events: list[LineEvent]) -> list[PlacedEvent]:
    """Order events per hunk: replaced pairs, then extra additions, then extra deletions.

    Within a hunk the i-th deleted line pairs with the i-th added line; both
    are anchored to the added line so a replaced row sits at its new position.
    """
    placed: list[PlacedEvent] = []
    for deleted, added in _group_by_hunk(events).values():
        paired = min(len(deleted), len(added))
        for old, new in zip(deleted[:paired], added[:paired]):
            placed.append(PlacedEvent(old, new.line_number))
            placed.append(PlacedEvent(new, new.line_number))
        for new in added[paired:]:
            placed.append(PlacedEvent(new, new.line_number))
        for old in deleted[paired:]:
            placed.append(PlacedEvent(old, old.old_line_number))
    return placed

"""Unified diff parsing into ordered added/deleted line events"""

import re

from loguru import logger

from mdtablediff.core.models import DiffStatus, LineEvent


# Matches the hunk header, e.g. "@@ -4,2 +4,3 @@" or "@@ -3 +3,0 @@"
HUNK_RE = re.compile(r'^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@')


def _count(group: str) -> int:
    # An omitted count means one line
    return 1 if group is None else int(group)


def _is_file_header(line: str, old_left: int, new_left: int) -> bool:
    """A ---/+++ line is content while the hunk still expects that many lines."""
    if line.startswith('---'):
        return old_left <= 0
    if line.startswith('+++'):
        return new_left <= 0
    return False


def parse_unified_diff(diff_text: str) -> list[LineEvent]:
    """Parse unified diff text into LineEvents, stable in input order.

    Only lines inside a hunk are interpreted. Context lines advance both line
    counters without producing an event. Text with no hunk header yields [].
    """
    if not isinstance(diff_text, str) or not diff_text:
        return []

    events: list[LineEvent] = []
    in_hunk = False
    hunk_id = 0
    old_line = new_line = 0
    old_left = new_left = 0

    for raw in diff_text.split('\n'):
        line = raw[:-1] if raw.endswith('\r') else raw

        m = HUNK_RE.match(line)
        if m:
            in_hunk = True
            hunk_id += 1
            old_line, old_left = int(m.group(1)), _count(m.group(2))
            new_line, new_left = int(m.group(3)), _count(m.group(4))
            continue

        if line.startswith('diff --git '):
            in_hunk = False
            continue
        if not in_hunk:
            continue
        if line == '' or line.startswith('\\'):
            continue
        if _is_file_header(line, old_left, new_left):
            in_hunk = False
            continue

        if line.startswith('-'):
            events.append(LineEvent(
                line_number=old_line,
                status=DiffStatus.deleted,
                old_line_number=old_line,
                old_content=line[1:],
                hunk_id=hunk_id,
            ))
            old_line += 1
            old_left -= 1
        elif line.startswith('+'):
            events.append(LineEvent(
                line_number=new_line,
                status=DiffStatus.added,
                new_content=line[1:],
                hunk_id=hunk_id,
            ))
            new_line += 1
            new_left -= 1
        else:
            old_line += 1
            new_line += 1
            old_left -= 1
            new_left -= 1

    logger.debug("parsed {} line events from {} hunk(s)", len(events), hunk_id)
    return events

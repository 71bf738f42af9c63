"""Pure utility for generating unified diffs between two text strings"""

import difflib


def unified_diff(
    old: str,
    new: str,
    from_label: str = "a",
    to_label: str = "b",
    context: int = 0,
    ) -> str:
    """Return unified diff text comparing old to new. Empty string if identical.

    Defaults to zero context lines, the shape expected by parse_unified_diff
    (the same output as `git diff --unified=0`).
    """
    old_lines = old.splitlines(keepends=True)
    new_lines = new.splitlines(keepends=True)
    lines = []
    for line in difflib.unified_diff(old_lines, new_lines, fromfile=from_label, tofile=to_label, n=context):
        lines.append(line if line.endswith("\n") else line + "\n")
    return "".join(lines)

"""Markdown table row tokenization and header normalization"""

import re


SEPARATOR_CELL_RE = re.compile(r'^[\s\-:]*$')
WHITESPACE_RE = re.compile(r'\s+')


def _tick_run(line: str, start: int) -> int:
    """Length of the backtick run beginning at start."""
    end = start
    while end < len(line) and line[end] == '`':
        end += 1
    return end - start


def _has_closing_run(line: str, start: int, size: int) -> bool:
    """True if a backtick run of exactly size occurs at or after start."""
    i = start
    while i < len(line):
        if line[i] == '`':
            run = _tick_run(line, i)
            if run == size:
                return True
            i += run
        else:
            i += 1
    return False


def tokenize_row(line: str) -> list[str]:
    """Split one table source line into trimmed cell strings.

    Pipes inside code spans or after a backslash are kept as content. The
    backslash of an escaped pipe is dropped; before any other character it is
    preserved. A backtick run without a matching closing run is literal text.
    """
    if not isinstance(line, str) or not line:
        return []

    cells: list[str] = []
    buf: list[str] = []
    escaped = False
    fence = 0   # tick count of the open code span, 0 when outside one
    i = 0

    while i < len(line):
        ch = line[i]
        if escaped:
            buf.append(ch if ch == '|' else '\\' + ch)
            escaped = False
            i += 1
            continue
        if ch == '\\':
            escaped = True
            i += 1
            continue
        if ch == '`':
            run = _tick_run(line, i)
            if fence == 0:
                if _has_closing_run(line, i + run, run):
                    fence = run
            elif run == fence:
                fence = 0
            buf.append('`' * run)
            i += run
            continue
        if ch == '|' and fence == 0:
            cells.append(''.join(buf).strip())
            buf = []
            i += 1
            continue
        buf.append(ch)
        i += 1

    if escaped:
        buf.append('\\')
    tail = ''.join(buf).strip()
    if tail or cells:
        cells.append(tail)

    if cells and cells[0] == '':
        cells.pop(0)
    if cells and cells[-1] == '':
        cells.pop()
    return cells


def count_table_cells(line: str) -> int:
    """Number of cells in a table source line."""
    return len(tokenize_row(line))


def is_separator_row(line: str) -> bool:
    """True for a delimiter row such as '| --- | :-: | --: |'."""
    if not isinstance(line, str) or '-' not in line:
        return False
    cells = tokenize_row(line)
    return bool(cells) and all(SEPARATOR_CELL_RE.match(c) for c in cells)


def normalize_header(header: str) -> str:
    """Trim, collapse internal whitespace, and lowercase a header cell."""
    if not isinstance(header, str):
        return ''
    return WHITESPACE_RE.sub(' ', header.strip()).lower()

"""Markdown table discovery: line ranges from markdown-it, cells from the row tokenizer"""

from markdown_it import MarkdownIt

from mdtablediff.core.models import TableBlock
from mdtablediff.core.utils.cells import tokenize_row


def _make_parser(preset: str) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    return MarkdownIt(preset, options_update={"linkify": False})


def _alignment(cell: str) -> str:
    cell = cell.strip()
    if cell.startswith(':') and cell.endswith(':') and len(cell) > 1:
        return 'center'
    if cell.endswith(':'):
        return 'right'
    return 'left'


def find_tables(markdown: str, parser_config: str = 'gfm-like') -> list[TableBlock]:
    """Locate every table in markdown. Line numbers are 0-based and inclusive."""
    lines = markdown.splitlines()
    tables: list[TableBlock] = []
    for token in _make_parser(parser_config).parse(markdown):
        if token.type != 'table_open' or not token.map:
            continue
        start, end = token.map[0], token.map[1] - 1
        headers = tokenize_row(lines[start])
        alignment = [_alignment(c) for c in tokenize_row(lines[start + 1])][:len(headers)]
        alignment += ['left'] * (len(headers) - len(alignment))
        tables.append(TableBlock(
            index=len(tables),
            start_line=start,
            end_line=end,
            headers=headers,
            rows=[tokenize_row(line) for line in lines[start + 2:end + 1]],
            alignment=alignment,
        ))
    return tables

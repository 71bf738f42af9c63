"""Report export: serialize table diffs as JSON or YAML"""

import json
from pathlib import Path

import yaml

from mdtablediff.core.models import TableDiff


FORMATS = ('json', 'yaml')


def build_report(path: str, results: list[TableDiff]) -> dict:
    """Plain dict report: source path plus one entry per table."""
    return {
        "path": path,
        "tables": [r.model_dump(mode='json') for r in results],
    }


def render_report(report: dict, fmt: str = 'json') -> str:
    if fmt == 'json':
        return json.dumps(report, indent=2, ensure_ascii=False) + "\n"
    if fmt == 'yaml':
        return yaml.safe_dump(report, default_flow_style=False, allow_unicode=True, sort_keys=False)
    raise ValueError(f"Unknown format {fmt!r}; expected one of {', '.join(FORMATS)}")


def write_report(report: dict, out: Path, fmt: str = 'json') -> Path:
    """Write the rendered report to out, creating parent directories."""
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(render_report(report, fmt), encoding='utf-8')
    return out

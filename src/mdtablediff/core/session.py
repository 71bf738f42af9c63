"""Caller-owned memo of the last rendered row diffs per file and table"""

from mdtablediff.core.models import TableDiff


class DiffSession:
    """Remembers the serialized row diff last seen for each (file, table).

    Engine functions keep no state between calls; a caller that re-renders
    only on change holds one of these. Not thread-safe.
    """

    def __init__(self):
        self._memo: dict[str, dict[int, str]] = {}

    def has_changed(self, file_id: str, results: list[TableDiff]) -> bool:
        """Record results for file_id and report whether any table differs from the last call."""
        tables = self._memo.setdefault(file_id, {})
        changed = False
        for result in results:
            serialized = result.model_dump_json()
            if tables.get(result.table_index) != serialized:
                tables[result.table_index] = serialized
                changed = True
        return changed

    def reset(self, file_id: str, table_indices: list[int] = None) -> None:
        """Drop memo entries for the given tables of file_id, or all of its tables."""
        tables = self._memo.get(file_id)
        if tables is None:
            return
        if table_indices is None:
            tables.clear()
            return
        for idx in table_indices:
            tables.pop(idx, None)

    def forget(self, file_id: str) -> None:
        self._memo.pop(file_id, None)

    def __contains__(self, file_id: str) -> bool:
        return file_id in self._memo

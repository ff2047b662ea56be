from __future__ import annotations

import csv
import os
from typing import Any, Dict, Iterable, List, Optional, Protocol, Sequence


class OutputSink(Protocol):
    """Where executed tasks land their rows and control files."""

    def write_rows(self, entry: str, header: Sequence[str], rows: Iterable[Sequence[Any]]) -> None: ...

    def write_text(self, entry: str, content: str) -> None: ...


class DirectorySink(OutputSink):
    """Writes each entry as a file under ``root``; CSV for row data."""

    def __init__(self, root: str) -> None:
        self.root = root.rstrip("/") or "."
        os.makedirs(self.root, exist_ok=True)

    def path(self, entry: str) -> str:
        return os.path.join(self.root, entry)

    def write_rows(self, entry: str, header: Sequence[str], rows: Iterable[Sequence[Any]]) -> None:
        with open(self.path(entry), "w", encoding="utf-8", newline="") as handle:
            writer = csv.writer(handle)
            writer.writerow(list(header))
            for row in rows:
                writer.writerow(["" if value is None else value for value in row])

    def write_text(self, entry: str, content: str) -> None:
        with open(self.path(entry), "w", encoding="utf-8") as handle:
            handle.write(content)


class MemorySink(OutputSink):
    """Keeps entries in memory; used for dry runs and tests."""

    def __init__(self) -> None:
        self.tables: Dict[str, Dict[str, Any]] = {}
        self.texts: Dict[str, str] = {}

    def write_rows(self, entry: str, header: Sequence[str], rows: Iterable[Sequence[Any]]) -> None:
        self.tables[entry] = {"header": list(header), "rows": [list(row) for row in rows]}

    def write_text(self, entry: str, content: str) -> None:
        self.texts[entry] = content

    def header(self, entry: str) -> Optional[List[str]]:
        table = self.tables.get(entry)
        return table["header"] if table else None

from __future__ import annotations

import json
from dataclasses import dataclass

from .errors import ImportConflictError

DOT_IMPORT = "."


@dataclass(frozen=True)
class ImportEntry:
    path: str
    alias: str = ""  # "" means no alias

    def line(self) -> str:
        # The alias token is kept even when empty; the formatter drops it.
        return f"{self.alias} {_go_quote(self.path)}"


def _go_quote(s: str) -> str:
    # JSON string escapes are a subset of Go interpreted string literal escapes.
    return json.dumps(s, ensure_ascii=False)


def _error_alias(alias: str) -> str:
    return alias if alias else "<none>"


class ImportRegistry:
    """Imports accumulated across every file that contributed methods.

    Manual entries are emitted first, in the order they were added, and
    are never checked for conflicts. Scanned entries follow in the order
    their path was first seen.
    """

    def __init__(self) -> None:
        self._manual: list[ImportEntry] = []
        self._scanned: list[ImportEntry] = []
        self._by_path: dict[str, ImportEntry] = {}
        self._by_alias: dict[str, ImportEntry] = {}

    def add_manual(self, alias: str, path: str) -> None:
        self._manual.append(ImportEntry(path=path, alias=alias))

    def register(self, path: str, alias: str = "") -> None:
        alias = alias or ""
        if alias == DOT_IMPORT:
            # Dot imports are dropped. Telling whether the interface uses any
            # of their names would need the imported package itself, so
            # assume it does not.
            return

        existing = self._by_path.get(path)
        if existing is not None:
            if existing.alias != alias:
                raise ImportConflictError(
                    f"package {path!r} imported multiple times with different aliases: "
                    f"{_error_alias(existing.alias)}, {_error_alias(alias)}"
                )
            return

        if alias and alias in self._by_alias:
            raise ImportConflictError(f"import alias {alias} already in use")

        entry = ImportEntry(path=path, alias=alias)
        self._by_path[path] = entry
        self._by_alias[alias] = entry
        self._scanned.append(entry)

    def entries(self) -> list[ImportEntry]:
        return [*self._manual, *self._scanned]

    def __len__(self) -> int:
        return len(self._manual) + len(self._scanned)

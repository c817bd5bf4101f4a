from __future__ import annotations

import pytest

from ifacegen.errors import ImportConflictError
from ifacegen.imports import ImportEntry, ImportRegistry


def test_registry_keeps_manual_entries_first_then_first_seen_order():
    reg = ImportRegistry()
    reg.add_manual("", "example.com/src/pkg")
    reg.register("io")
    reg.register("context")
    reg.register("io")
    reg.register("github.com/x/y", "yy")

    assert reg.entries() == [
        ImportEntry(path="example.com/src/pkg"),
        ImportEntry(path="io"),
        ImportEntry(path="context"),
        ImportEntry(path="github.com/x/y", alias="yy"),
    ]
    assert len(reg) == 4


def test_registry_rejects_path_with_two_aliases():
    reg = ImportRegistry()
    reg.register("pkg/a", "")
    with pytest.raises(ImportConflictError, match=r"pkg/a.*different aliases: <none>, x"):
        reg.register("pkg/a", "x")


def test_registry_rejects_alias_reused_for_other_path():
    reg = ImportRegistry()
    reg.register("pkg/a", "x")
    with pytest.raises(ImportConflictError, match=r"import alias x already in use"):
        reg.register("pkg/b", "x")


def test_registry_ignores_dot_imports():
    reg = ImportRegistry()
    reg.register("pkg/a", "")
    reg.register("pkg/a", ".")
    reg.register("pkg/b", ".")
    reg.register("pkg/c", ".")
    assert [e.path for e in reg.entries()] == ["pkg/a"]


def test_registry_allows_unaliased_paths_sharing_last_element():
    reg = ImportRegistry()
    reg.register("crypto/rand")
    reg.register("math/rand")
    assert [e.path for e in reg.entries()] == ["crypto/rand", "math/rand"]


def test_manual_entries_are_not_conflict_checked_against_each_other():
    reg = ImportRegistry()
    reg.add_manual("x", "pkg/a")
    reg.add_manual("x", "pkg/b")
    assert len(reg.entries()) == 2


def test_import_line_keeps_empty_alias_token():
    assert ImportEntry(path="io").line() == ' "io"'
    assert ImportEntry(path="github.com/x/y", alias="yy").line() == 'yy "github.com/x/y"'


def test_import_line_escapes_control_characters():
    assert ImportEntry(path="a\nb").line() == ' "a\\nb"'
    assert ImportEntry(path='we"ird\\').line() == ' "we\\"ird\\\\"'

import os
import shutil
import subprocess
import sys
from pathlib import Path

import pytest

from ifacegen.errors import ImportConflictError, ParseError


def _write_go_source(src_dir: Path) -> None:
    (src_dir / "store.go").write_text(
        "\n".join(
            [
                "package store",
                "",
                "import (",
                '    "context"',
                '    "io"',
                ")",
                "",
                "type Item struct{ Name string }",
                "",
                "type Store struct{}",
                "",
                "// Get returns the item stored under k.",
                "func (s *Store) Get(ctx context.Context, k string) (v *Item, err error) {",
                "    return nil, nil",
                "}",
                "",
                "func (s Store) Dump(w io.Writer, items ...Item) error { return nil }",
                "",
                "func (s *Store) watch(ch chan<- Item) {}",
                "",
                "func (s *Store) Watch() <-chan Item { return nil }",
                "",
            ]
        ),
        encoding="utf-8",
    )
    (src_dir / "util.go").write_text(
        "\n".join(
            [
                "package store",
                "",
                'import io "bufio"',
                "",
                "func helper(r *io.Reader) {}",
                "",
            ]
        ),
        encoding="utf-8",
    )


_integration = pytest.mark.skipif(
    os.environ.get("IFACEGEN_INTEGRATION") != "1",
    reason="set IFACEGEN_INTEGRATION=1 to run integration tests",
)


@_integration
def test_generate_from_go_sources(tmp_path: Path, monkeypatch):
    from ifacegen import InterfaceOptions, generate_interface

    src_dir = tmp_path / "store"
    src_dir.mkdir()
    _write_go_source(src_dir)

    monkeypatch.setenv("IFACEGEN_FORMATTER", "gofmt")
    out = generate_interface(
        InterfaceOptions(
            struct_name="Store",
            iface_name="StoreInterface",
            package="mocks",
            paths=[str(src_dir)],
            add_imports=["example.com/store"],
            qualifier="store",
        )
    ).decode()

    assert "// Code generated by ifacegen. DO NOT EDIT." in out
    assert "package mocks" in out
    assert "var _ StoreInterface = (*store.Store)(nil)" in out
    assert "\t// Get returns the item stored under k.\n" in out
    assert "\tGet(ctx context.Context, k string) (v *store.Item, err error)\n" in out
    # The variadic element follows a ".", so it stays unqualified.
    assert "\tDump(w io.Writer, items ...Item) error\n" in out
    assert "\tWatch() <-chan store.Item\n" in out
    assert "watch(" not in out
    # util.go declares no Store methods, so its clashing alias is ignored.
    assert "bufio" not in out


@_integration
def test_conflicting_aliases_across_relevant_files(tmp_path: Path):
    from ifacegen import Maker

    a = tmp_path / "a.go"
    b = tmp_path / "b.go"
    a.write_text('package p\n\nimport x "pkg/a"\n\ntype T struct{}\n\nfunc (T) A(v x.V) {}\n', encoding="utf-8")
    b.write_text('package p\n\nimport x "pkg/b"\n\nfunc (*T) B(v x.V) {}\n', encoding="utf-8")

    with pytest.raises(ImportConflictError, match=r"import alias x already in use"):
        Maker("T").parse_files(a, b)


@_integration
def test_parse_error_from_go_parser(tmp_path: Path):
    from ifacegen import Maker

    bad = tmp_path / "bad.go"
    bad.write_text("func (", encoding="utf-8")
    with pytest.raises(ParseError, match=r"bad.go"):
        Maker("T").parse_files(bad)


@_integration
@pytest.mark.skipif(shutil.which("gofmt") is None, reason="gofmt not on PATH")
def test_cli_module_entrypoint(tmp_path: Path):
    src_dir = tmp_path / "store"
    src_dir.mkdir()
    _write_go_source(src_dir)

    out_file = tmp_path / "mocks" / "store.go"
    subprocess.check_call(
        [
            sys.executable,
            "-m",
            "ifacegen",
            "gen",
            "--file",
            str(src_dir),
            "--struct",
            "Store",
            "--iface",
            "StoreInterface",
            "--pkg",
            "mocks",
            "--output",
            str(out_file),
        ],
        env={**os.environ, "IFACEGEN_FORMATTER": "gofmt"},
    )
    text = out_file.read_text(encoding="utf-8")
    assert "Get(ctx context.Context, k string) (v *Item, err error)" in text
    assert "var _" not in text

"""Interface generation from the methods of a Go struct."""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Callable

from .collector import MethodCollector, MethodSignature
from .emitter import InterfaceSpec, emit_interface
from .errors import ParseError
from .formatting import Formatter
from .goscan.scan import scan_sources
from .goscan.units import CompilationUnit, FuncDecl
from .imports import ImportRegistry

Scanner = Callable[[list[tuple[str, str]]], list[CompilationUnit]]

GO_SOURCE_SUFFIX = ".go"


def go_files(*paths: str | Path) -> list[Path]:
    """Expand `paths` into Go source files.

    Files are kept in the given order. A directory is replaced by the `.go`
    files directly inside it (no recursion), sorted by name.
    """
    out: list[Path] = []
    for p in paths:
        p = Path(p)
        if not p.exists():
            raise FileNotFoundError(f"no such file or directory: {p}")
        if p.is_dir():
            names = sorted(
                c.name for c in p.iterdir() if c.is_file() and c.name.endswith(GO_SOURCE_SUFFIX)
            )
            out.extend(p / n for n in names)
        else:
            out.append(p)
    return out


def _read_source(path: Path) -> str:
    try:
        return path.read_bytes().decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(path.name, f"illegal UTF-8 encoding at byte offset {e.start}") from e


class Maker:
    """Accumulates methods and imports for one generated interface.

    Create a fresh instance per run: configure it, feed it files in the
    order they should be processed, then call `make_interface`.
    """

    def __init__(self, struct_name: str, *, copy_docs: bool = True, scanner: Scanner | None = None):
        self.struct_name = struct_name
        self.copy_docs = copy_docs
        self._scanner = scanner or scan_sources
        self._qualifier: str | None = None
        self._omit_generated_comment = False
        self._collector = MethodCollector(struct_name, copy_docs=copy_docs)
        self._imports = ImportRegistry()

    def add_import(self, alias: str, path: str) -> None:
        self._imports.add_manual(alias, path)

    def source_package(self, qualifier: str) -> None:
        """Qualify unqualified exported types with `qualifier`.

        Also emits an assertion that `*qualifier.Struct` implements the
        generated interface.
        """
        self._qualifier = qualifier or None
        self._collector.qualifier = self._qualifier

    def omit_generated_comment(self) -> None:
        self._omit_generated_comment = True

    @property
    def methods(self) -> list[MethodSignature]:
        return self._collector.methods

    @property
    def imports(self) -> ImportRegistry:
        return self._imports

    def process_unit(self, unit: CompilationUnit) -> int:
        """Process one parsed file; returns how many methods it added."""
        if unit.error:
            raise ParseError(unit.filename, unit.error)

        before = len(self._collector.methods)
        # Files without relevant methods are not allowed to cause import conflicts.
        if not self._collector.collect(unit):
            return 0
        for spec in unit.imports():
            self._imports.register(spec.path, spec.name or "")
        return len(self._collector.methods) - before

    def parse_source(self, src: str, filename: str) -> int:
        """Parse and process `src`; `filename` is used for messages only."""
        return self.process_unit(self._scanner([(filename, src)])[0])

    def parse_files(self, *files: str | Path, on_file: Callable[[Path, int], None] | None = None) -> None:
        paths = [Path(f) for f in files]
        sources = [(p.name, _read_source(p)) for p in paths]
        units = self._scanner(sources)
        for path, unit in zip(paths, units):
            added = self.process_unit(unit)
            if on_file is not None:
                on_file(path, added)

    def interface_spec(self, pkg_name: str, iface_name: str) -> InterfaceSpec:
        return InterfaceSpec(
            struct_name=self.struct_name,
            package=pkg_name,
            iface_name=iface_name,
            methods=self._collector.methods,
            imports=self._imports.entries(),
            qualifier=self._qualifier,
            omit_generated_comment=self._omit_generated_comment,
        )

    def make_interface(self, pkg_name: str, iface_name: str, *, formatter: Formatter | None = None) -> bytes:
        """Generate the Go file declaring `iface_name` in package `pkg_name`."""
        return emit_interface(self.interface_spec(pkg_name, iface_name), formatter=formatter)


def read_structs(*paths: str | Path, scanner: Scanner | None = None) -> dict[str, int]:
    """Count function declarations per receiver type across `paths`.

    Declarations without a single plain `T`/`*T` receiver (functions,
    generic receivers) are counted under "".
    """
    files = go_files(*paths)
    units = (scanner or scan_sources)([(p.name, _read_source(p)) for p in files])
    counts: Counter[str] = Counter()
    for unit in units:
        if unit.error:
            raise ParseError(unit.filename, unit.error)
        for d in unit.decls:
            counts[d.receiver_type_name() if isinstance(d, FuncDecl) else ""] += 1
    return dict(counts)

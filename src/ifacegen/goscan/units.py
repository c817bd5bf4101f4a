from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from ..qualify import is_ident_char


@dataclass(frozen=True)
class Field:
    names: list[str]
    type: str
    type_error: str = ""  # set when go/printer could not render `type`


@dataclass(frozen=True)
class FuncDecl:
    name: str
    recv: list[Field]
    params: list[Field]
    results: list[Field]
    doc: list[str] = field(default_factory=list)

    @property
    def exported(self) -> bool:
        return is_exported(self.name)

    def receiver_type_name(self) -> str:
        """Base type name of a single `T` or `*T` receiver, else ""."""
        if sum(max(1, len(f.names)) for f in self.recv) != 1:
            return ""
        t = self.recv[0].type
        if t.startswith("*"):
            t = t[1:]
        if not t or not all(is_ident_char(ch) for ch in t):
            return ""
        return t


@dataclass(frozen=True)
class ImportSpec:
    path: str
    name: str | None = None  # explicit alias, including "." and "_"


@dataclass(frozen=True)
class ImportDecl:
    specs: list[ImportSpec]


@dataclass(frozen=True)
class OtherDecl:
    pass


Decl = Union[FuncDecl, ImportDecl, OtherDecl]


@dataclass(frozen=True)
class CompilationUnit:
    filename: str
    package: str
    decls: list[Decl]
    error: str = ""

    def imports(self) -> list[ImportSpec]:
        out: list[ImportSpec] = []
        for d in self.decls:
            if isinstance(d, ImportDecl):
                out.extend(d.specs)
        return out


def is_exported(name: str) -> bool:
    return bool(name) and name[0].isupper()


def _fields(raw: Any) -> list[Field]:
    out: list[Field] = []
    if not isinstance(raw, list):
        return out
    for item in raw:
        if not isinstance(item, dict):
            continue
        names = item.get("names") or []
        out.append(
            Field(
                names=[n for n in names if isinstance(n, str)],
                type=str(item.get("type") or ""),
                type_error=str(item.get("type_error") or ""),
            )
        )
    return out


def _decl(raw: Any) -> Decl:
    if not isinstance(raw, dict):
        return OtherDecl()
    kind = raw.get("kind")
    if kind == "func":
        doc = raw.get("doc") or []
        return FuncDecl(
            name=str(raw.get("name") or ""),
            recv=_fields(raw.get("recv")),
            params=_fields(raw.get("params")),
            results=_fields(raw.get("results")),
            doc=[d for d in doc if isinstance(d, str)],
        )
    if kind == "import":
        specs: list[ImportSpec] = []
        for s in raw.get("specs") or []:
            if not isinstance(s, dict) or not isinstance(s.get("path"), str):
                continue
            name = s.get("name")
            specs.append(ImportSpec(path=s["path"], name=name if isinstance(name, str) else None))
        return ImportDecl(specs=specs)
    return OtherDecl()


def unit_from_json(raw: dict[str, Any]) -> CompilationUnit:
    return CompilationUnit(
        filename=str(raw.get("filename") or ""),
        package=str(raw.get("package") or ""),
        decls=[_decl(d) for d in raw.get("decls") or []],
        error=str(raw.get("error") or ""),
    )

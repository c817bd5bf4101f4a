from __future__ import annotations

from dataclasses import dataclass

from .errors import SignatureRenderError
from .goscan.units import CompilationUnit, Field, FuncDecl
from .qualify import qualify_type


@dataclass(frozen=True)
class MethodSignature:
    name: str
    code: str  # `Name(params) (results)`
    docs: tuple[str, ...] = ()

    def lines(self) -> list[str]:
        return [*self.docs, self.code]


class MethodCollector:
    """Exported methods of one struct, gathered across many files.

    The first declaration of a method name wins; later duplicates (the same
    file listed twice, overlapping directories) are ignored.
    """

    def __init__(self, struct_name: str, *, copy_docs: bool = True, qualifier: str | None = None):
        self.struct_name = struct_name
        self.copy_docs = copy_docs
        self.qualifier = qualifier
        self._methods: list[MethodSignature] = []
        self._names: set[str] = set()

    @property
    def methods(self) -> list[MethodSignature]:
        return list(self._methods)

    def collect(self, unit: CompilationUnit) -> bool:
        """Add the struct's exported methods declared in `unit`.

        Returns True when the unit declares at least one exported method on
        the struct, even if all of them were already collected. Only such
        units have their imports registered.
        """
        has_methods = False
        for d in unit.decls:
            if not isinstance(d, FuncDecl) or d.receiver_type_name() != self.struct_name:
                continue
            if not d.exported:
                continue

            has_methods = True
            if d.name in self._names:
                continue

            params = self._render_fields(d.params, where="parameters", method=d.name)
            results = self._render_fields(d.results, where="return values", method=d.name)
            docs = tuple(d.doc) if self.copy_docs else ()

            self._names.add(d.name)
            self._methods.append(MethodSignature(name=d.name, code=f"{d.name}({params}) ({results})", docs=docs))
        return has_methods

    def _render_fields(self, fields: list[Field], *, where: str, method: str) -> str:
        parts: list[str] = []
        for f in fields:
            if f.type_error or not f.type:
                raise SignatureRenderError(where, method, f.type_error or "empty type expression")
            t = qualify_type(f.type, self.qualifier)
            if f.names:
                parts.append(f"{', '.join(f.names)} {t}")
            else:
                parts.append(t)
        return ", ".join(parts)

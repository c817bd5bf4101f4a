from __future__ import annotations

from dataclasses import dataclass

from .collector import MethodSignature
from .errors import FormatError
from .formatting import Formatter, format_go_source
from .imports import ImportEntry

GENERATED_COMMENT = "// Code generated by ifacegen. DO NOT EDIT."


@dataclass(frozen=True)
class InterfaceSpec:
    struct_name: str
    package: str
    iface_name: str
    methods: list[MethodSignature]
    imports: list[ImportEntry]
    qualifier: str | None = None
    omit_generated_comment: bool = False


def render_interface(spec: InterfaceSpec) -> str:
    """Assemble the unformatted Go file for `spec`."""
    lines: list[str] = []
    if not spec.omit_generated_comment:
        lines.append(GENERATED_COMMENT)
    lines.append("")
    lines.append(f"package {spec.package}")
    lines.append("import (")
    for imp in spec.imports:
        lines.append(imp.line())
    lines.append(")")
    if spec.qualifier:
        # Compile-time check that the struct still satisfies the interface.
        lines.append(f"var _ {spec.iface_name} = (*{spec.qualifier}.{spec.struct_name})(nil)")
    lines.append(f"type {spec.iface_name} interface {{")
    for m in spec.methods:
        lines.extend(m.lines())
    lines.append("}")
    return "\n".join(lines)


def emit_interface(spec: InterfaceSpec, *, formatter: Formatter | None = None) -> bytes:
    unformatted = render_interface(spec)
    fmt = formatter or format_go_source
    try:
        return fmt(unformatted.encode("utf-8"))
    except FormatError as e:
        raise FormatError(
            "failed to format generated code. This could be a bug in ifacegen. "
            f"The generated code was:\n{unformatted}\nError: {e}",
            source=unformatted,
        ) from e

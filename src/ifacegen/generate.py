"""One-shot interface generation from a set of options."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from .formatting import Formatter
from .maker import Maker, Scanner, go_files


@dataclass(frozen=True)
class InterfaceOptions:
    struct_name: str
    iface_name: str
    package: str
    paths: list[str]
    copy_docs: bool = True
    output: str | None = None
    add_imports: list[str] = field(default_factory=list)
    qualifier: str | None = None
    omit_generated_comment: bool = False


def generate_interface(
    opts: InterfaceOptions,
    *,
    formatter: Formatter | None = None,
    scanner: Scanner | None = None,
    on_file: Callable[[Path, int], None] | None = None,
) -> bytes:
    """Generate the interface described by `opts`.

    When `opts.output` is set the result is also written there.
    """
    maker = Maker(opts.struct_name, copy_docs=opts.copy_docs, scanner=scanner)
    for path in opts.add_imports:
        maker.add_import("", path)
    if opts.qualifier:
        maker.source_package(opts.qualifier)
    if opts.omit_generated_comment:
        maker.omit_generated_comment()

    maker.parse_files(*go_files(*opts.paths), on_file=on_file)
    result = maker.make_interface(opts.package, opts.iface_name, formatter=formatter)

    if opts.output:
        out = Path(opts.output)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_bytes(result)
    return result

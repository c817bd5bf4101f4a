from __future__ import annotations

import argparse
import importlib.metadata
import sys
from pathlib import Path

from .errors import IfaceGenError


def _bool_arg(v: str) -> bool:
    s = v.strip().lower()
    if s in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if s in {"0", "false", "f", "no", "n", "off"}:
        return False
    raise argparse.ArgumentTypeError(f"expected true or false, got {v!r}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="ifacegen")
    sub = parser.add_subparsers(dest="cmd", required=True)

    sub.add_parser("version", help="Print ifacegen version.")

    p_gen = sub.add_parser("gen", help="Generate an interface from the methods of a struct.")
    p_gen.add_argument(
        "-f",
        "--file",
        action="append",
        required=True,
        help="Go source file or directory to read (repeatable; directories are not recursed).",
    )
    p_gen.add_argument("-s", "--struct", required=True, help="Generate an interface for this structure name.")
    p_gen.add_argument("-i", "--iface", required=True, help="Name of the generated interface.")
    p_gen.add_argument("-p", "--pkg", required=True, help="Package name for the generated interface.")
    p_gen.add_argument(
        "-d",
        "--doc",
        type=_bool_arg,
        default=True,
        help="Copy method documentation from source files (default: true).",
    )
    p_gen.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output file name. If not provided, result will be printed to stdout.",
    )
    p_gen.add_argument(
        "-a",
        "--add-import",
        action="append",
        default=[],
        help="An additional import to add to the generated file (repeatable).",
    )
    p_gen.add_argument(
        "-r",
        "--rewrite",
        default=None,
        help="Rewrites unqualified exported types with this package prefix.",
    )
    p_gen.add_argument(
        "--no-generated-comment",
        action="store_true",
        help="Omit the 'Code generated ... DO NOT EDIT.' header.",
    )
    p_gen.add_argument("-v", "--verbose", action="store_true", help="Report scanned files on stderr.")

    p_types = sub.add_parser("types", help="List receiver types and their method counts.")
    p_types.add_argument(
        "-f",
        "--file",
        action="append",
        required=True,
        help="Go source file or directory to read (repeatable).",
    )

    args = parser.parse_args(argv)
    if args.cmd == "version":
        try:
            print(importlib.metadata.version("ifacegen"))
        except Exception:
            # Best-effort fallback for editable/local-only contexts.
            print("0.0.0")
        return

    if args.cmd == "gen":
        from .generate import InterfaceOptions, generate_interface

        opts = InterfaceOptions(
            struct_name=args.struct,
            iface_name=args.iface,
            package=args.pkg,
            paths=list(args.file),
            copy_docs=bool(args.doc),
            output=args.output,
            add_imports=list(args.add_import),
            qualifier=args.rewrite,
            omit_generated_comment=bool(args.no_generated_comment),
        )

        def report(path: Path, added: int) -> None:
            print(f"scanned {path}: {added} method(s)", file=sys.stderr)

        try:
            result = generate_interface(opts, on_file=report if args.verbose else None)
        except (IfaceGenError, OSError) as e:
            raise SystemExit(f"ifacegen: {e}") from e
        if args.output is None:
            print(result.decode("utf-8"))
        return

    if args.cmd == "types":
        from .maker import read_structs

        try:
            counts = read_structs(*args.file)
        except (IfaceGenError, OSError) as e:
            raise SystemExit(f"ifacegen: {e}") from e
        for name in sorted(n for n in counts if n):
            print(f"{name} {counts[name]}")
        return

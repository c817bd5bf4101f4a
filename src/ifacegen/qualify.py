"""Lexical package qualification of rendered Go type expressions.

Qualification works on text only. No attempt is made to resolve what an
identifier refers to: every exported-looking identifier that does not
already follow a `.` gets the qualifier prepended, whether it names a
type, a constant or anything else.
"""

from __future__ import annotations


def is_ident_char(ch: str) -> bool:
    return ch == "_" or ch.isalpha() or ch.isdecimal()


def _needs_prefix(cur: str, prev: str) -> bool:
    # already qualified
    if prev == ".":
        return False
    # mid-identifier
    if prev and is_ident_char(prev):
        return False
    if not is_ident_char(cur):
        return False
    return cur.isupper()


def qualify_type(expr: str, qualifier: str | None) -> str:
    """Prefix unqualified exported identifiers in `expr` with `qualifier.`.

    `*Foo` becomes `*pkg.Foo`, `map[string][]Bar` becomes
    `map[string][]pkg.Bar`, while `io.Reader` and `string` are left alone.
    An empty qualifier returns `expr` unchanged.
    """
    if not qualifier:
        return expr

    prefix = qualifier + "."
    out: list[str] = []
    prev = ""
    for ch in expr:
        if _needs_prefix(ch, prev):
            out.append(prefix)
        out.append(ch)
        prev = ch
    return "".join(out)

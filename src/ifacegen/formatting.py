from __future__ import annotations

from typing import Callable

from . import toolchain
from .errors import FormatError

Formatter = Callable[[bytes], bytes]


def format_go_source(src: bytes) -> bytes:
    """Canonicalize Go source with goimports/gofmt (see `toolchain.formatter_name`)."""
    name = toolchain.formatter_name()
    if name == "none":
        return src

    proc = toolchain.run([name], input=src)
    if proc.returncode != 0:
        raise FormatError(
            f"{name} failed\n{toolchain.decode_output(proc)}",
            source=src.decode("utf-8", errors="replace"),
        )
    return proc.stdout or b""

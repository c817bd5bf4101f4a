from __future__ import annotations

import os
import shutil
import subprocess
from pathlib import Path

from .errors import GoToolchainError

FORMATTERS = ("goimports", "gofmt", "none")


def go_binary() -> str:
    """Return the Go command to run.

    Override with `IFACEGEN_GO`.
    """
    return os.environ.get("IFACEGEN_GO") or "go"


def formatter_name() -> str:
    """Pick the code formatter.

    `IFACEGEN_FORMATTER` selects one of `goimports`, `gofmt` or `none`.
    Otherwise `goimports` is used when it is on PATH (it also removes
    unused imports), else `gofmt`.
    """
    override = os.environ.get("IFACEGEN_FORMATTER")
    if override:
        if override not in FORMATTERS:
            raise GoToolchainError(
                f"unsupported IFACEGEN_FORMATTER={override!r} (expected one of: {', '.join(FORMATTERS)})"
            )
        return override
    if shutil.which("goimports") is not None:
        return "goimports"
    return "gofmt"


def run(
    cmd: list[str],
    *,
    input: bytes,
    cwd: Path | None = None,
    env: dict[str, str] | None = None,
) -> subprocess.CompletedProcess[bytes]:
    """Run `cmd` feeding `input` on stdin; the caller inspects the return code."""
    prog = cmd[0] if cmd else "<unknown>"
    try:
        return subprocess.run(
            cmd,
            input=input,
            cwd=str(cwd) if cwd is not None else None,
            env=env,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=False,
        )
    except FileNotFoundError as e:
        if prog == go_binary():
            raise GoToolchainError(
                f"Go toolchain not found (`{prog}` is missing from PATH). "
                "Install Go and ensure `go` is available on PATH, or set IFACEGEN_GO."
            ) from e
        raise GoToolchainError(f"command not found: {prog}") from e


def decode_output(proc: subprocess.CompletedProcess[bytes]) -> str:
    stdout = (proc.stdout or b"").decode("utf-8", errors="replace")
    stderr = (proc.stderr or b"").decode("utf-8", errors="replace")
    return "\n".join([s for s in [stdout.strip("\n"), stderr.strip("\n")] if s]) + "\n"

"""Domain-specific errors for ifacegen."""

from __future__ import annotations


class IfaceGenError(Exception):
    """Base error for ifacegen."""


class GoToolchainError(IfaceGenError):
    """Raised when the Go toolchain (or the formatter) cannot be executed."""


class ParseError(IfaceGenError):
    """Raised when a source file cannot be parsed into declarations."""

    def __init__(self, filename: str, detail: str):
        super().__init__(f"parsing file failed: {filename}: {detail}")
        self.filename = filename
        self.detail = detail


class SignatureRenderError(IfaceGenError):
    """Raised when a parameter or return type cannot be rendered to text."""

    def __init__(self, where: str, method: str, detail: str):
        super().__init__(f"failed printing {where} of {method}: {detail}")
        self.where = where
        self.method = method


class ImportConflictError(IfaceGenError):
    """Raised when import aliases and paths disagree across scanned files."""


class FormatError(IfaceGenError):
    """Raised when the formatter rejects the generated code."""

    def __init__(self, message: str, source: str):
        super().__init__(message)
        self.source = source

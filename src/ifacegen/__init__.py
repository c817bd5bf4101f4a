"""ifacegen: generate Go interfaces from the methods of a struct."""

from __future__ import annotations

from . import errors
from .generate import InterfaceOptions, generate_interface
from .maker import Maker, go_files, read_structs
from .qualify import qualify_type

__all__ = [
    "InterfaceOptions",
    "Maker",
    "errors",
    "generate_interface",
    "go_files",
    "qualify_type",
    "read_structs",
]

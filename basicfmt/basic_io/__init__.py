# basicfmt/basic_io/__init__.py
# Package initialization & exports for basicfmt I/O operations

from .documents import read_source, write_source
from .generics import (
    write_json_safe,
    read_json_safe,
    ensure_parent,
)

__all__ = [
    # Source I/O
    "read_source",
    "write_source",
    # Generics
    "write_json_safe",
    "read_json_safe",
    "ensure_parent",
]

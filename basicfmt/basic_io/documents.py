# basicfmt/basic_io/documents.py
# Read & write BASIC source files as Buffers, preserving newline style

from pathlib import Path

from ..core.buffer import Buffer
from ..core.exceptions import FileReadError, FileWriteError
from ..core.verbose import vlog_file_read, vlog_file_write
from .generics import ensure_parent


# * Read a BASIC source file into a Buffer
def read_source(path: Path, encoding: str = "utf-8") -> Buffer:
    try:
        # newline="" keeps CRLF so the buffer can write it back unchanged
        with open(path, encoding=encoding, newline="") as fh:
            text = fh.read()
    except FileNotFoundError:
        raise FileReadError(f"Source file not found: {path}", path)
    except UnicodeDecodeError as e:
        raise FileReadError(f"Cannot decode {path} as {encoding}: {e}", path)
    except OSError as e:
        raise FileReadError(f"Cannot read {path}: {e}", path) from e

    vlog_file_read(path, len(text))
    return Buffer.from_text(text)


# * Write a Buffer back to disk
def write_source(buffer: Buffer, path: Path, encoding: str = "utf-8") -> None:
    text = buffer.to_text()
    try:
        ensure_parent(path)
        with open(path, "w", encoding=encoding, newline="") as fh:
            fh.write(text)
    except OSError as e:
        raise FileWriteError(f"Cannot write {path}: {e}", path) from e
    vlog_file_write(path, len(text))

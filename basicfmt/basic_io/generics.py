# basicfmt/basic_io/generics.py
# JSON persistence for the settings file plus the parent-directory helper shared w/ source writes

import json
from pathlib import Path
from typing import Any

from ..core.exceptions import JSONParsingError
from ..core.verbose import vlog_file_read, vlog_file_write


def ensure_parent(path: Path) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)


# numbered excerpt around a parse error, offending line marked w/ ">>>"
def _error_excerpt(text: str, lineno: int, context: int = 2) -> str:
    lines = text.split("\n")
    first = max(1, lineno - context)
    last = min(len(lines), lineno + context)
    return "\n".join(
        f"{'>>> ' if n == lineno else '    '}{n:3}: {lines[n - 1]}"
        for n in range(first, last + 1)
    )


def write_json_safe(obj: dict[str, Any], path: Path) -> None:
    ensure_parent(path)
    content = json.dumps(obj, indent=2)
    path.write_text(content, encoding="utf-8")
    vlog_file_write(path, len(content))


# * Read a JSON object; syntax errors & non-object documents raise JSONParsingError
def read_json_safe(path: Path) -> dict[str, Any]:
    text = Path(path).read_text(encoding="utf-8")
    vlog_file_read(path, len(text))
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        excerpt = _error_excerpt(text, e.lineno)
        raise JSONParsingError(f"Invalid JSON in {path}:\n{excerpt}\nError: {e.msg}") from e
    if not isinstance(data, dict):
        raise JSONParsingError(
            f"Expected a JSON object in {path}, got {type(data).__name__}"
        )
    return data

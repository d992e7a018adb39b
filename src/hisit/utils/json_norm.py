"""Canonical JSON serialization — single dump path for JSON log lines.

Guarantees:
  - Stable key ordering (``sort_keys=True``)
  - ``Path`` objects → POSIX strings
  - ``datetime`` → ISO 8601, ``timedelta`` → seconds (float)
  - Dataclasses → dicts (via ``dataclasses.asdict``)
  - Trailing newline at EOF unless the caller opts out
"""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, Mapping


def _to_builtin(obj: Any) -> Any:
    """Convert common non-JSON types into JSON-safe builtins."""
    if obj is None:
        return None
    if isinstance(obj, (str, int, bool, float)):
        return obj
    if isinstance(obj, Path):
        return obj.as_posix()
    if isinstance(obj, datetime):
        return obj.isoformat()
    if isinstance(obj, timedelta):
        return obj.total_seconds()
    if is_dataclass(obj) and not isinstance(obj, type):
        return _to_builtin(asdict(obj))
    if isinstance(obj, Mapping):
        return {str(k): _to_builtin(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple, set, frozenset)):
        return [_to_builtin(v) for v in obj]
    # Fall back to string (a log line must never fail to render)
    return str(obj)


def stable_json_dumps(
    obj: Any,
    *,
    indent: int | None = 2,
    newline: bool = True,
    **_ignored: Any,
) -> str:
    """
    Canonical JSON serialization.

    With ``indent=None`` the output is a single compact line, which is what
    the JSON log format writes.  Extra keyword arguments (such as the
    ``default=`` hook structlog's ``JSONRenderer`` passes) are ignored;
    conversion always goes through ``_to_builtin``.
    """
    built = _to_builtin(obj)
    s = json.dumps(
        built,
        indent=indent,
        sort_keys=True,
        ensure_ascii=False,
        separators=(",", ":") if indent is None else None,
    )
    return s + "\n" if newline else s

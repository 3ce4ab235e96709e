from __future__ import annotations
from typing import Any, Optional


def safe_int(value: Any, default: Optional[int] = None) -> Optional[int]:
    """Convert to int safely (ids arrive as ints or numeric strings)."""
    try:
        return int(str(value).strip())
    except Exception:
        return default


def coalesce_str(*vals: Any) -> str:
    """Return the first non-empty string among vals, trimmed, or ''."""
    for v in vals:
        if isinstance(v, str) and v.strip():
            return v.strip()
    return ""


def display_day(value: Any) -> str:
    """'2025-01-01T00:00:00.000Z' -> '2025-01-01'."""
    return value[:10] if isinstance(value, str) else ""


def same_id(a: Any, b: Any) -> bool:
    """Id equality that tolerates '1' vs 1 from form/widget round-trips."""
    left, right = safe_int(a), safe_int(b)
    return left is not None and left == right

"""Pure timecode helpers shared by the offset engine and the renderer."""
from __future__ import annotations

from typing import Optional


def parse_timecode(timecode: str) -> Optional[int]:
    """Convert a ``HH:MM:SS`` or ``MM:SS`` timecode to total seconds.

    Every field must be made of digits; fields are not range-checked, so
    ``"00:90"`` is 90 seconds. Returns ``None`` for anything else.
    """
    parts = timecode.split(':')
    if not all(p.isascii() and p.isdigit() for p in parts):
        return None

    if len(parts) == 3:
        hours, minutes, seconds = (int(p) for p in parts)
        return hours * 3600 + minutes * 60 + seconds
    if len(parts) == 2:
        minutes, seconds = (int(p) for p in parts)
        return minutes * 60 + seconds
    return None


def format_timecode(total_seconds: int) -> str:
    """Format seconds as zero-padded ``HH:MM:SS``.

    Negative values floor at ``00:00:00``.
    """
    safe_seconds = max(0, int(total_seconds))
    hours = safe_seconds // 3600
    minutes = (safe_seconds % 3600) // 60
    seconds = safe_seconds % 60
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"

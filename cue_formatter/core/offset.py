"""Signed time offsets applied uniformly to parsed start times."""
from __future__ import annotations

import dataclasses
import logging
import re
from typing import Iterable, List, Optional

from .cue_parser import Track
from .timeutils import format_timecode, parse_timecode

logger = logging.getLogger(__name__)

INTEGER_OFFSET = re.compile(r'^[+-]?[0-9]+$')

OFFSET_HELP = (
    "Invalid offset. Use seconds (e.g. +5, -2) "
    "or time (e.g. +00:30, -00:01:10)."
)


def parse_offset(offset: str) -> Optional[int]:
    """Parse an offset like ``+5``, ``-2``, ``+00:30`` or ``-00:01:10``.

    Blank input is a zero offset. Returns ``None`` when the text is not a
    valid offset, so callers can tell it apart from ``0``.
    """
    trimmed = (offset or '').strip()
    if not trimmed:
        return 0

    if INTEGER_OFFSET.match(trimmed):
        return int(trimmed)

    sign = -1 if trimmed.startswith('-') else 1
    unsigned = trimmed[1:] if trimmed[0] in '+-' else trimmed
    seconds = parse_timecode(unsigned)
    if seconds is None:
        logger.debug("Rejected offset %r", offset)
        return None
    return sign * seconds


def apply_offset(tracks: Iterable[Track], offset_seconds: int) -> List[Track]:
    """Return new tracks with ``start_at`` shifted by ``offset_seconds``.

    Results below zero clamp to ``00:00:00``. A track whose start time does
    not parse is passed through unchanged.
    """
    adjusted: List[Track] = []
    for track in tracks:
        original = parse_timecode(track.start_at)
        if original is None:
            logger.debug("Keeping unparsable start time %r", track.start_at)
            adjusted.append(track)
            continue
        adjusted.append(dataclasses.replace(
            track, start_at=format_timecode(original + offset_seconds)
        ))
    return adjusted

"""Rekordbox cue sheet parser.

Only ``TRACK``/``TITLE``/``PERFORMER``/``INDEX 01`` lines are understood;
everything else is skipped without raising. The performer is track-scoped:
a ``PERFORMER`` line before the first ``TRACK`` header (the disc performer)
is never used as a fallback.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

TRACK_HEADER = re.compile(r'^\s*TRACK\s+[0-9]+\s+AUDIO\s*$', re.IGNORECASE)
TITLE_LINE = re.compile(r'^\s*TITLE\s+"(.+)"\s*$', re.IGNORECASE)
PERFORMER_LINE = re.compile(r'^\s*PERFORMER\s+"(.+)"\s*$', re.IGNORECASE)
INDEX_LINE = re.compile(r'^\s*INDEX\s+01\s+([0-9]{2}:[0-9]{2}:[0-9]{2})\s*$', re.IGNORECASE)

# Line kinds returned by classify_line
TRACK = 'track'
TITLE = 'title'
PERFORMER = 'performer'
INDEX = 'index'
OTHER = 'other'

_FIELD_PATTERNS = (
    (TITLE, TITLE_LINE),
    (PERFORMER, PERFORMER_LINE),
    (INDEX, INDEX_LINE),
)


@dataclass(frozen=True)
class Track:
    """One parsed track; ``start_at`` is a ``HH:MM:SS`` timecode."""

    title: str
    start_at: str
    performer: str = ''


def classify_line(line: str) -> Tuple[str, Optional[str]]:
    """Return ``(kind, value)`` for a single cue line.

    ``value`` is the captured text for title/performer/index lines and
    ``None`` for track headers and unrecognized lines.
    """
    if TRACK_HEADER.match(line):
        return TRACK, None
    for kind, pattern in _FIELD_PATTERNS:
        match = pattern.match(line)
        if match:
            return kind, match.group(1)
    return OTHER, None


def _finalize(fields: Optional[Dict[str, str]], tracks: List[Track]) -> None:
    if fields is None:
        return
    if not fields.get(TITLE) or not fields.get(INDEX):
        logger.debug("Dropping incomplete track block: %r", fields)
        return
    tracks.append(Track(
        title=fields[TITLE],
        start_at=fields[INDEX],
        performer=fields.get(PERFORMER, ''),
    ))


def parse_cue(cue_text: str) -> List[Track]:
    """Parse cue sheet text into an ordered list of :class:`Track`.

    A block is emitted only when it carried both a title and an
    ``INDEX 01`` before the next ``TRACK`` header or the end of input.
    """
    lines = cue_text.replace('\r\n', '\n').replace('\r', '\n').split('\n')

    tracks: List[Track] = []
    current: Optional[Dict[str, str]] = None

    for line in lines:
        kind, value = classify_line(line)
        if kind == TRACK:
            _finalize(current, tracks)
            current = {}
        elif kind != OTHER and current is not None:
            current[kind] = value

    _finalize(current, tracks)
    logger.debug("Parsed %d track(s)", len(tracks))
    return tracks

"""Template rendering for parsed tracks.

Templates are plain strings with ``{token}`` placeholders, e.g.
``"{start} {title} by {artist}"``. Unknown placeholders are left in the
output as written so typos stay visible.

Two cleanup policies apply after substitution:

- CSV-style templates (any template containing a comma) are only stripped,
  so empty fields such as a missing artist are preserved.
- Every other template is tidied for human reading. A connective ``by``
  right before an empty placeholder is dropped, then repeated spaces
  collapse, a trailing `` -`` separator goes and empty ``()`` groups are
  removed, in that order.
"""
from __future__ import annotations

import functools
import re
from typing import Dict, Iterable, List, NamedTuple, Optional, Tuple

from .cue_parser import Track
from .timeutils import parse_timecode

TOKEN_PATTERN = re.compile(r'\{([a-z_]+)\}')

DANGLING_CONNECTIVE = re.compile(r'(^|\s+)by\s*$', re.IGNORECASE)
EMPTY_PARENS = re.compile(r'\(\s*\)')
MULTI_SPACE = re.compile(r' {2,}')
TRAILING_SEPARATOR = re.compile(r'\s+-\s*$')


class TokenOption(NamedTuple):
    token: str
    description: str


TOKEN_OPTIONS: Tuple[TokenOption, ...] = (
    TokenOption('{start}', 'Track start time (HH:MM:SS)'),
    TokenOption('{start_seconds}', 'Track start time as total seconds'),
    TokenOption('{title}', 'Track title'),
    TokenOption('{artist}', 'Track performer/artist (track-level only)'),
    TokenOption('{track_no}', 'Track number (1, 2, 3...)'),
    TokenOption('{track_no_padded}', 'Track number padded (01, 02, 03...)'),
)


class TemplateSpan(NamedTuple):
    """A literal run of text, or a placeholder when ``token`` is set."""

    text: str
    token: Optional[str] = None


@functools.lru_cache(maxsize=64)
def tokenize_template(template: str) -> Tuple[TemplateSpan, ...]:
    """Split a template into literal and placeholder spans, in order."""
    spans: List[TemplateSpan] = []
    position = 0
    for match in TOKEN_PATTERN.finditer(template):
        if match.start() > position:
            spans.append(TemplateSpan(template[position:match.start()]))
        spans.append(TemplateSpan(match.group(0), match.group(1)))
        position = match.end()
    if position < len(template):
        spans.append(TemplateSpan(template[position:]))
    return tuple(spans)


def token_values(track: Track, position: int) -> Dict[str, str]:
    """Build the token lookup for ``track`` at 0-based ``position``."""
    start_seconds = parse_timecode(track.start_at)
    track_no = str(position + 1)
    performer = track.performer or ''
    return {
        'start': track.start_at,
        'start_seconds': '' if start_seconds is None else str(start_seconds),
        'title': track.title,
        'artist': performer,
        'track_no': track_no,
        'track_no_padded': track_no.zfill(2),
        # Older token names
        'start_at': track.start_at,
        'track_title': track.title,
        'performer': performer,
    }


def _tidy(text: str) -> str:
    text = MULTI_SPACE.sub(' ', text)
    text = TRAILING_SEPARATOR.sub('', text)
    text = EMPTY_PARENS.sub('', text)
    return text.strip()


def render_template(track: Track, position: int, template: str) -> str:
    """Render one track through ``template``.

    ``position`` is the track's 0-based index in the list, used for the
    ``{track_no}`` tokens.
    """
    values = token_values(track, position)
    csv_style = ',' in template

    pieces: List[str] = []
    previous: Optional[TemplateSpan] = None
    for span in tokenize_template(template):
        if span.token is None or span.token not in values:
            pieces.append(span.text)
        else:
            value = values[span.token]
            if (not value and not csv_style
                    and previous is not None and previous.token is None):
                pieces[-1] = DANGLING_CONNECTIVE.sub(' ', pieces[-1])
            pieces.append(value)
        previous = span

    rendered = ''.join(pieces)
    if csv_style:
        return rendered.strip()
    return _tidy(rendered)


def render_tracks(tracks: Iterable[Track], template: str) -> str:
    """Render every track with ``template``, one line per track."""
    return '\n'.join(
        render_template(track, index, template)
        for index, track in enumerate(tracks)
    )

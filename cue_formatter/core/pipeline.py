"""Composition of parser, offset engine and renderer.

This is the single entry point a front end needs: raw cue text, a template
and the offset text go in, parsed tracks and the rendered output come out.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .cue_parser import Track, parse_cue
from .offset import apply_offset, parse_offset
from .templates import render_tracks

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormatResult:
    """Outcome of :func:`format_cue`.

    ``offset_seconds`` is ``None`` when the offset text was invalid; in that
    case ``adjusted`` is empty and ``output`` is ``''``.
    """

    tracks: List[Track]
    offset_seconds: Optional[int]
    adjusted: List[Track] = field(default_factory=list)
    output: str = ''

    @property
    def offset_valid(self) -> bool:
        return self.offset_seconds is not None

    @property
    def track_count(self) -> int:
        return len(self.tracks)


def format_cue(cue_text: str, template: str, offset: str = '') -> FormatResult:
    """Parse ``cue_text``, shift it by ``offset`` and render with ``template``."""
    tracks = parse_cue(cue_text)
    offset_seconds = parse_offset(offset)
    if offset_seconds is None:
        logger.debug("Invalid offset %r, skipping rendering", offset)
        return FormatResult(tracks=tracks, offset_seconds=None)

    adjusted = apply_offset(tracks, offset_seconds)
    return FormatResult(
        tracks=tracks,
        offset_seconds=offset_seconds,
        adjusted=adjusted,
        output=render_tracks(adjusted, template),
    )

"""
Core logic for the Cue File Formatter.

Everything in this package is pure and side-effect free: text in, parsed
tracks or rendered strings out. File access lives in ``services``.
"""

__all__ = [
    "Track",
    "parse_cue",
    "parse_timecode",
    "format_timecode",
    "parse_offset",
    "apply_offset",
    "OFFSET_HELP",
    "render_template",
    "render_tracks",
    "TOKEN_OPTIONS",
    "FormatOption",
    "BUILTIN_FORMATS",
    "DEFAULT_FORMAT_ID",
    "CUSTOM_FORMAT_ID",
    "build_format_options",
    "resolve_template",
    "FormatResult",
    "format_cue",
]

from .timeutils import parse_timecode, format_timecode
from .cue_parser import Track, parse_cue
from .offset import parse_offset, apply_offset, OFFSET_HELP
from .templates import render_template, render_tracks, TOKEN_OPTIONS
from .formats import (
    FormatOption,
    BUILTIN_FORMATS,
    DEFAULT_FORMAT_ID,
    CUSTOM_FORMAT_ID,
    build_format_options,
    resolve_template,
)
from .pipeline import FormatResult, format_cue

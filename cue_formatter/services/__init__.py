"""Service layer modules (file I/O at the edges of the core).

Currently includes reading cue files and writing rendered output.
"""

__all__ = [
    "cue_file",
    "errors",
]

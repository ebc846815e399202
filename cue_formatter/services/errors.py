"""Custom exceptions for service layer operations."""


class CueFormatterError(Exception):
    """Base class for errors raised outside the pure core."""


class CueFileError(CueFormatterError):
    """Raised when a cue file is rejected or cannot be read."""


class OutputWriteError(CueFormatterError):
    """Raised when writing the rendered tracklist fails."""

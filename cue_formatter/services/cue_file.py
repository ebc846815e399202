"""Cue file loading and output writing.

File I/O is isolated here so the core only ever sees already-decoded text.
"""
from __future__ import annotations

import logging
import os

import chardet

from .errors import CueFileError, OutputWriteError


logger = logging.getLogger(__name__)

CUE_EXTENSION = '.cue'
UTF8_BOM = b'\xef\xbb\xbf'


def ensure_cue_extension(path: str) -> None:
    """Reject any path whose name does not end in ``.cue``."""
    if not os.path.basename(path).lower().endswith(CUE_EXTENSION):
        logger.error("Rejected non-cue file: %s", path)
        raise CueFileError("Please use a .cue file.")


def decode_cue_bytes(data: bytes) -> str:
    """Decode raw cue bytes to text.

    UTF-8 is tried first (with or without BOM). On failure the encoding is
    detected with chardet, falling back to latin-1.
    """
    if data.startswith(UTF8_BOM):
        data = data[len(UTF8_BOM):]
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError:
        pass

    result = chardet.detect(data) or {}
    encoding = result.get('encoding')
    logger.info(
        "Cue file is not UTF-8, detected %s (confidence: %.0f%%)",
        encoding, (result.get('confidence') or 0) * 100,
    )
    if encoding:
        try:
            return data.decode(encoding)
        except (LookupError, UnicodeDecodeError) as e:
            logger.warning("Decoding as %s failed: %s", encoding, e)
    return data.decode('latin-1', errors='replace')


def load_cue_file(path: str) -> str:
    """Read a ``.cue`` file and return its decoded text.

    Raises ``CueFileError`` for wrong extensions or unreadable files.
    """
    ensure_cue_extension(path)
    logger.info("Reading cue file: %s", path)
    try:
        with open(path, 'rb') as f:
            data = f.read()
    except OSError as e:
        logger.error("Failed to read cue file %s: %s", path, e)
        raise CueFileError(str(e))
    logger.debug("Read %d bytes from %s", len(data), path)
    return decode_cue_bytes(data)


def write_output(text: str, output_path: str) -> str:
    """Write the rendered tracklist to ``output_path`` as UTF-8.

    Returns ``output_path`` on success.
    """
    logger.info("Writing tracklist: %s", output_path)
    try:
        directory = os.path.dirname(output_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(text)
            if text and not text.endswith('\n'):
                f.write('\n')
        return output_path
    except OSError as e:
        logger.error("Failed to write tracklist to %s: %s", output_path, e)
        raise OutputWriteError(str(e))

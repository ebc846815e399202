"""
Cue File Formatter: turn rekordbox cue sheets into export-ready tracklists.
"""

__version__ = "0.1.0"

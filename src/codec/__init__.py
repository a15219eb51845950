"""Plain-text content codec.

This package encodes field maps into the human-diffable text format
stored on disk and performs atomic content file I/O.
"""

"""Content versioning and storage layer.

This package maps models and languages to versioned plain-text files,
wraps stored field maps in content objects and derives editing locks.
"""

"""Content-bearing models.

Pages, files, the site and users own versioned content. This package
defines those model kinds, the blueprints describing their fields and
the context object that replaces global application state.
"""

"""
Core primitives: runtime type tags, extremum groups and their result models.

Pure functions without state or I/O.
"""

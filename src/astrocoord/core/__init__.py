"""
Core numerical guards, geometry kernel and representations.

Pure value types and functions; no I/O.
"""
